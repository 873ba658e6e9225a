"""Discord-side data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiscordMessage:
    """A Discord message posted to the /discord webhook."""

    author_name: str
    content: str
    is_bot: bool = False
    webhook_id: str | None = None

    @property
    def from_automation(self) -> bool:
        """Webhook and bot posts are never relayed back (loop prevention)."""
        return self.is_bot or bool(self.webhook_id)
