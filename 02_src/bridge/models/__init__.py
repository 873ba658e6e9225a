"""Core data models for the bridge."""

from .discord import DiscordMessage
from .events import (
    NO_TEXT,
    EventKind,
    HandleResult,
    MessageNotification,
    ReactionEvent,
    ReactionNotification,
    ReplyContext,
    preview_text,
)
from .messages import (
    Attachment,
    ImageAttachment,
    InboundMessage,
    Reactor,
    ReplyAttachment,
    SenderType,
    UnknownAttachment,
)

__all__ = [
    # Messages
    "Attachment",
    "ImageAttachment",
    "InboundMessage",
    "Reactor",
    "ReplyAttachment",
    "SenderType",
    "UnknownAttachment",
    # Events
    "EventKind",
    "HandleResult",
    "MessageNotification",
    "ReactionEvent",
    "ReactionNotification",
    "ReplyContext",
    "NO_TEXT",
    "preview_text",
    # Discord
    "DiscordMessage",
]
