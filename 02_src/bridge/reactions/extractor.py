"""Reaction detection on GroupMe callbacks."""

from ..models import InboundMessage, ReactionEvent

DEFAULT_EMOJI = "❤️"
DEFAULT_REACTOR_NAME = "Someone"

# GroupMe glyph -> Discord glyph. Glyphs not listed pass through unchanged.
EMOJI_ALIASES = {
    "❤": "❤️",
    "👍": "👍",
    "👎": "👎",
    "😂": "😂",
    "😢": "😢",
    "😮": "😮",
    "😡": "😡",
    "👏": "👏",
    "🪩": "🪩",
}


def convert_reaction_emoji(emoji: str) -> str:
    """Normalize a GroupMe reaction glyph for Discord."""
    return EMOJI_ALIASES.get(emoji, emoji)


def extract_reaction(message: InboundMessage) -> ReactionEvent | None:
    """Return the current reaction carried by `message`, or None.

    Only the last favorited_by entry counts; earlier entries are stale
    states, not a log to replay.
    """
    if not message.reactors:
        return None

    latest = message.reactors[-1]
    return ReactionEvent(
        emoji=convert_reaction_emoji(latest.emoji or DEFAULT_EMOJI),
        reactor_name=latest.nickname or DEFAULT_REACTOR_NAME,
        reactor_avatar_url=latest.image_url,
        message_id=message.id,
        group_id=message.group_id,
        message_text=message.text,
    )
