"""Relay of Discord messages into GroupMe."""

from typing import Any

from .delivery import IGroupMeDelivery
from .logging_config import get_logger
from .models import HandleResult
from .payloads import parse_discord_message

logger = get_logger(__name__)


class DiscordRelay:
    """Forwards human Discord posts to GroupMe; drops webhook and bot posts."""

    def __init__(self, delivery: IGroupMeDelivery):
        self._delivery = delivery

    async def handle_inbound(self, raw_payload: Any) -> HandleResult:
        message = parse_discord_message(raw_payload)
        if message.from_automation:
            return HandleResult(delivered=False, ignored=True)

        logger.debug("Relaying Discord message from %s", message.author_name)
        delivered = await self._delivery.send_text(message.author_name, message.content)
        return HandleResult(delivered=delivered)
