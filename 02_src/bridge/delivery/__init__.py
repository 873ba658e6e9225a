"""Delivery module."""

from .discord_webhook import (
    DiscordWebhookDelivery,
    IDiscordDelivery,
    build_message_payload,
    build_reaction_payload,
)
from .groupme_bot import GroupMeBotDelivery, IGroupMeDelivery

__all__ = [
    "DiscordWebhookDelivery",
    "GroupMeBotDelivery",
    "IDiscordDelivery",
    "IGroupMeDelivery",
    "build_message_payload",
    "build_reaction_payload",
]
