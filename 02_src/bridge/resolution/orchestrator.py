"""Handling of inbound GroupMe webhook events."""

from typing import Any, Protocol

from ..delivery import IDiscordDelivery
from ..history import IHistoryFetcher
from ..logging_config import get_logger, log_context
from ..models import (
    EventKind,
    HandleResult,
    InboundMessage,
    MessageNotification,
    ReactionEvent,
    ReactionNotification,
    ReplyContext,
    preview_text,
)
from ..payloads import parse_groupme_message
from ..reactions import extract_reaction
from .heuristic import detect_heuristic_reply
from .structured import StructuredReplyResolver

logger = get_logger(__name__)

RECENT_WINDOW_LIMIT = 20
REACTION_PREVIEW_LIMIT = 100


class IResolutionOrchestrator(Protocol):
    """Entry point for GroupMe callbacks."""

    async def handle_inbound(self, raw_payload: Any) -> HandleResult:
        """Classify, resolve reply context and deliver one callback body."""
        ...


class ResolutionOrchestrator:
    """Classifies GroupMe events and forwards them to Discord.

    Order: bot messages are dropped, reactions are delivered as reaction
    notices, everything else is delivered as a message with its reply
    context. Reply detection runs only when a history fetcher is given.
    """

    def __init__(
        self,
        delivery: IDiscordDelivery,
        history: IHistoryFetcher | None = None,
    ):
        self._delivery = delivery
        self._history = history
        self._structured = (
            StructuredReplyResolver(history) if history is not None else None
        )

        if not self.reply_context_enabled:
            logger.warning(
                "GROUPME_ACCESS_TOKEN not set - reply context detection disabled"
            )

    @property
    def reply_context_enabled(self) -> bool:
        return self._history is not None

    async def handle_inbound(self, raw_payload: Any) -> HandleResult:
        """Parse a decoded webhook body and handle it.

        Raises:
            MalformedPayload: body is not a GroupMe message.
        """
        return await self.handle_message(parse_groupme_message(raw_payload))

    async def handle_message(self, message: InboundMessage) -> HandleResult:
        if message.is_bot:
            # Our own bot posts come back through the callback
            return HandleResult(delivered=False, ignored=True)

        reaction = extract_reaction(message)
        if reaction is not None:
            logger.info(
                "Received GroupMe reaction event",
                extra=log_context(message_id=message.id, group_id=message.group_id),
            )
            delivered = await self._delivery.send_reaction(
                self._reaction_notification(reaction)
            )
            return HandleResult(delivered=delivered, kind=EventKind.REACTION)

        reply_context = await self.resolve_reply_context(message)
        notification = MessageNotification(
            author_name=message.name,
            text=message.text,
            avatar_url=message.avatar_url,
            reply_context=reply_context,
            image_urls=message.image_urls,
        )
        delivered = await self._delivery.send_message(notification)
        return HandleResult(
            delivered=delivered,
            kind=EventKind.MESSAGE,
            has_reply=reply_context is not None,
        )

    async def resolve_reply_context(
        self, message: InboundMessage
    ) -> ReplyContext | None:
        """Structured reply first, then text heuristics over recent history."""
        if self._history is None or self._structured is None:
            return None

        replied = await self._structured.resolve(message)
        if replied is None and message.text:
            recent = await self._history.fetch_history(
                message.group_id, before_id=message.id, limit=RECENT_WINDOW_LIMIT
            )
            replied = detect_heuristic_reply(message, recent)

        if replied is None:
            return None

        logger.info(
            'Detected reply to message from %s: "%s..."',
            replied.name,
            (replied.text or "")[:50],
            extra=log_context(message_id=message.id, reply_to=replied.id),
        )
        return ReplyContext.from_message(replied)

    @staticmethod
    def _reaction_notification(reaction: ReactionEvent) -> ReactionNotification:
        return ReactionNotification(
            emoji=reaction.emoji,
            reactor_name=reaction.reactor_name,
            reactor_avatar_url=reaction.reactor_avatar_url,
            message_preview=preview_text(reaction.message_text, REACTION_PREVIEW_LIMIT),
        )
