"""GroupMe message data models."""

from dataclasses import dataclass, field
from enum import Enum


class SenderType(str, Enum):
    """Who posted a GroupMe message."""

    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ImageAttachment:
    """An image attached to a message."""

    url: str
    type: str = field(default="image", init=False)


@dataclass(frozen=True)
class ReplyAttachment:
    """Explicit reply pointer set by the GroupMe client."""

    target_id: str | None
    base_target_id: str | None = None  # root of the reply chain
    type: str = field(default="reply", init=False)

    def matches(self, message_id: str) -> bool:
        """Whether message_id is the immediate or the base reply target."""
        return message_id in (self.target_id, self.base_target_id)


@dataclass(frozen=True)
class UnknownAttachment:
    """Any attachment type the bridge does not act on (location, emoji, ...)."""

    type: str


Attachment = ImageAttachment | ReplyAttachment | UnknownAttachment


@dataclass(frozen=True)
class Reactor:
    """One entry of a message's favorited_by list."""

    user_id: str | None = None
    nickname: str | None = None
    emoji: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class InboundMessage:
    """A GroupMe message, either from a webhook callback or from history."""

    id: str
    group_id: str
    user_id: str
    name: str
    text: str | None = None
    attachments: tuple[Attachment, ...] = ()
    sender_type: SenderType = SenderType.USER
    avatar_url: str | None = None
    reactors: tuple[Reactor, ...] = ()
    created_at: int | None = None

    @property
    def is_bot(self) -> bool:
        return self.sender_type is SenderType.BOT

    @property
    def reply_attachment(self) -> ReplyAttachment | None:
        """First reply attachment, if any."""
        for attachment in self.attachments:
            if isinstance(attachment, ReplyAttachment):
                return attachment
        return None

    @property
    def image_urls(self) -> tuple[str, ...]:
        return tuple(
            a.url for a in self.attachments if isinstance(a, ImageAttachment)
        )
