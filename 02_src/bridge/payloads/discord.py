"""Normalization of Discord JSON into DiscordMessage."""

from typing import Any

from pydantic import ValidationError

from ..errors import MalformedPayload
from ..models import DiscordMessage
from .schemas import DiscordAuthor, DiscordPayload, describe_validation_error

DEFAULT_AUTHOR_NAME = "Discord User"


def parse_discord_message(raw: Any) -> DiscordMessage:
    """Build a DiscordMessage from a /discord webhook body.

    ``author`` may be a Discord user object or a plain display name.
    """
    try:
        body = DiscordPayload.model_validate(raw)
    except ValidationError as e:
        raise MalformedPayload(describe_validation_error(e)) from e

    author = body.author
    if isinstance(author, DiscordAuthor):
        author_name = author.global_name or author.username
        is_bot = bool(author.bot)
    else:
        author_name = author
        is_bot = False

    return DiscordMessage(
        author_name=author_name or DEFAULT_AUTHOR_NAME,
        content=body.content or "",
        is_bot=is_bot,
        webhook_id=body.webhook_id or None,
    )
