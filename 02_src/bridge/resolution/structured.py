"""Resolution of explicit GroupMe reply attachments."""

from ..history import IHistoryFetcher
from ..logging_config import get_logger
from ..models import InboundMessage

logger = get_logger(__name__)

REPLY_HISTORY_LIMIT = 50


class StructuredReplyResolver:
    """Looks up the target of a reply attachment in recent group history."""

    def __init__(self, history: IHistoryFetcher, limit: int = REPLY_HISTORY_LIMIT):
        self._history = history
        self._limit = limit

    async def resolve(self, message: InboundMessage) -> InboundMessage | None:
        """Return the replied-to message, or None.

        Messages without a reply attachment return None without a fetch.
        Either the immediate target or the base target of the reply chain
        is accepted; the first match in fetch order wins.
        """
        reply = message.reply_attachment
        if reply is None:
            return None

        window = await self._history.fetch_history(
            message.group_id, before_id=message.id, limit=self._limit
        )
        for candidate in window:
            if candidate.id != message.id and reply.matches(candidate.id):
                return candidate

        logger.debug(
            "Reply target %s not found in %d messages", reply.target_id, len(window)
        )
        return None
