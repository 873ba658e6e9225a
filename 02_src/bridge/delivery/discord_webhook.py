"""Delivery of GroupMe messages and reactions to a Discord webhook."""

from typing import Protocol

from ..errors import TransportFailure
from ..logging_config import get_logger
from ..models import (
    NO_TEXT,
    MessageNotification,
    ReactionNotification,
    ReplyContext,
    preview_text,
)
from ..transport import ITransport, RequestSpec

logger = get_logger(__name__)

REPLY_PREVIEW_LIMIT = 150
DEFAULT_USERNAME = "GroupMe User"
REACTIONS_USERNAME = "GroupMe Reactions"


class IDiscordDelivery(Protocol):
    """Outbound notifications to Discord."""

    async def send_message(self, notification: MessageNotification) -> bool:
        """Post a relayed message. Return True on success."""
        ...

    async def send_reaction(self, notification: ReactionNotification) -> bool:
        """Post a reaction notice. Return True on success."""
        ...


def format_reply_header(context: ReplyContext) -> str:
    """Bold "Replying to" line quoting the replied message."""
    author = context.author_name or "Unknown User"
    preview = preview_text(context.text, REPLY_PREVIEW_LIMIT)
    return f'**Replying to {author}:** "{preview}"'


def build_message_payload(notification: MessageNotification) -> dict:
    """Discord webhook body for a relayed message."""
    content = notification.text or NO_TEXT
    if notification.reply_context:
        content = f"{format_reply_header(notification.reply_context)}\n\n{content}"

    payload = {
        "username": notification.author_name or DEFAULT_USERNAME,
        "content": content,
        "avatar_url": notification.avatar_url,
    }
    if notification.image_urls:
        payload["embeds"] = [
            {"image": {"url": url}} for url in notification.image_urls
        ]
    return payload


def build_reaction_payload(notification: ReactionNotification) -> dict:
    """Discord webhook body for a reaction notice."""
    return {
        "username": REACTIONS_USERNAME,
        "content": (
            f"{notification.emoji} **{notification.reactor_name}** "
            f'reacted to: "{notification.message_preview}"'
        ),
        "avatar_url": notification.reactor_avatar_url,
    }


class DiscordWebhookDelivery:
    """Posts notifications to a single Discord webhook URL."""

    def __init__(self, transport: ITransport, webhook_url: str | None):
        self._transport = transport
        self._webhook_url = webhook_url

    async def send_message(self, notification: MessageNotification) -> bool:
        return await self._post(build_message_payload(notification), "Message")

    async def send_reaction(self, notification: ReactionNotification) -> bool:
        return await self._post(build_reaction_payload(notification), "Reaction")

    async def _post(self, payload: dict, label: str) -> bool:
        if not self._webhook_url:
            logger.warning("%s not sent: DISCORD_WEBHOOK_URL not set", label)
            return False

        try:
            response = await self._transport.request(
                RequestSpec(method="POST", url=self._webhook_url, json=payload)
            )
        except TransportFailure as e:
            logger.error("Error sending %s to Discord: %s", label.lower(), e)
            return False

        logger.info("%s sent to Discord: %s", label, response.status_code)
        return response.ok
