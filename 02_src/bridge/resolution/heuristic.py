"""Text-pattern reply detection for messages without a reply attachment.

Patterns are tried in order and the first one that finds a candidate wins:

1. ``@name`` mention, matched against author display names.
2. ``> quoted text`` line, matched against message texts.
3. ``quoted text:`` line, matched against message texts.

Matching is case-insensitive substring containment. Candidates sharing the
message's id or author are never returned.
"""

import re
from collections.abc import Callable, Iterable

from ..models import InboundMessage

MENTION_PATTERN = re.compile(r"@(\w+)")
QUOTE_PATTERNS = (
    re.compile(r"^>\s*([^\r\n]+)", re.MULTILINE),
    re.compile(r"^([^\r\n]+):\s*$", re.MULTILINE),
)


def _is_other(message: InboundMessage, candidate: InboundMessage) -> bool:
    return candidate.id != message.id and candidate.user_id != message.user_id


def _first_match(
    message: InboundMessage,
    window: Iterable[InboundMessage],
    predicate: Callable[[InboundMessage], bool],
) -> InboundMessage | None:
    for candidate in window:
        if _is_other(message, candidate) and predicate(candidate):
            return candidate
    return None


def detect_heuristic_reply(
    message: InboundMessage, recent_window: list[InboundMessage]
) -> InboundMessage | None:
    """Guess which message in `recent_window` `message` is replying to."""
    if not message.text:
        return None
    text = message.text

    mention = MENTION_PATTERN.search(text)
    if mention:
        mentioned = mention.group(1).lower()
        found = _first_match(
            message,
            recent_window,
            lambda m: bool(m.name) and mentioned in m.name.lower(),
        )
        if found:
            return found

    for pattern in QUOTE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        quoted = match.group(1).lower()
        found = _first_match(
            message,
            recent_window,
            lambda m: bool(m.text) and quoted in m.text.lower(),
        )
        if found:
            return found

    return None
