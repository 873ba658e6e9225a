"""Delivery of Discord messages into GroupMe through a bot."""

from typing import Protocol

from ..config import GROUPME_API_URL
from ..errors import TransportFailure
from ..logging_config import get_logger
from ..transport import ITransport, RequestSpec

logger = get_logger(__name__)


class IGroupMeDelivery(Protocol):
    """Outbound posts to GroupMe."""

    async def send_text(self, author: str, content: str) -> bool:
        """Post "author: content" as the bot. Return True on success."""
        ...


class GroupMeBotDelivery:
    """Posts through the GroupMe bots API."""

    def __init__(
        self,
        transport: ITransport,
        bot_id: str | None,
        api_url: str = GROUPME_API_URL,
    ):
        self._transport = transport
        self._bot_id = bot_id
        self._api_url = api_url.rstrip("/")

    async def send_text(self, author: str, content: str) -> bool:
        if not self._bot_id:
            logger.warning("Message not sent: GROUPME_BOT_ID not set")
            return False

        spec = RequestSpec(
            method="POST",
            url=f"{self._api_url}/bots/post",
            json={"bot_id": self._bot_id, "text": f"{author}: {content}"},
        )
        try:
            response = await self._transport.request(spec)
        except TransportFailure as e:
            logger.error("Error sending to GroupMe: %s", e)
            return False

        logger.info("Message sent to GroupMe: %s", response.status_code)
        return response.ok
