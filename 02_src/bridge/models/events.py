"""Derived events, notifications and handling results."""

from dataclasses import dataclass
from enum import Enum

from .messages import InboundMessage

NO_TEXT = "[No text content]"


def preview_text(text: str | None, limit: int) -> str:
    """Cut text to at most `limit` characters, ending with '...' when cut."""
    if not text:
        return NO_TEXT
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


class EventKind(str, Enum):
    """Kind of inbound GroupMe event that was delivered."""

    REACTION = "reaction"
    MESSAGE = "message"


@dataclass(frozen=True)
class ReactionEvent:
    """Latest reaction on a GroupMe message."""

    emoji: str
    reactor_name: str
    message_id: str
    group_id: str
    reactor_avatar_url: str | None = None
    message_text: str | None = None


@dataclass(frozen=True)
class ReplyContext:
    """The earlier message an inbound message replies to."""

    message_id: str
    author_name: str | None
    text: str | None

    @classmethod
    def from_message(cls, message: InboundMessage) -> "ReplyContext":
        return cls(message_id=message.id, author_name=message.name, text=message.text)


@dataclass(frozen=True)
class MessageNotification:
    """A GroupMe message ready for delivery to Discord."""

    author_name: str | None
    text: str | None
    avatar_url: str | None = None
    reply_context: ReplyContext | None = None
    image_urls: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReactionNotification:
    """A GroupMe reaction ready for delivery to Discord."""

    emoji: str
    reactor_name: str
    message_preview: str
    reactor_avatar_url: str | None = None


@dataclass
class HandleResult:
    """Outcome of handling one inbound webhook event."""

    delivered: bool
    kind: EventKind | None = None
    has_reply: bool | None = None
    ignored: bool = False

    @property
    def success(self) -> bool:
        return self.delivered or self.ignored

    def to_dict(self) -> dict:
        """Response body for the webhook caller."""
        body: dict = {"success": self.success}
        if self.ignored:
            body["ignored"] = True
        if self.kind is not None:
            body["type"] = self.kind.value
        if self.has_reply is not None:
            body["hasReply"] = self.has_reply
        return body
