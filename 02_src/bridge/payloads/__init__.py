"""Payload normalization module."""

from .discord import parse_discord_message
from .groupme import parse_groupme_message
from .schemas import DiscordPayload, GroupMeCallback

__all__ = [
    "DiscordPayload",
    "GroupMeCallback",
    "parse_discord_message",
    "parse_groupme_message",
]
