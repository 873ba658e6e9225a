"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "bridge.log"

GROUPME_API_URL = "https://api.groupme.com/v3"
USER_AGENT = "GroupMe-Discord-Bridge/1.0"


@dataclass(frozen=True)
class BridgeConfig:
    """Settings the Application is built from."""

    discord_webhook_url: str | None = None
    groupme_bot_id: str | None = None
    groupme_access_token: str | None = None
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    log_level: str = "INFO"
    http_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Read settings from environment variables."""
        return cls(
            discord_webhook_url=os.getenv("DISCORD_WEBHOOK_URL") or None,
            groupme_bot_id=os.getenv("GROUPME_BOT_ID") or None,
            groupme_access_token=os.getenv("GROUPME_ACCESS_TOKEN") or None,
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "10")),
        )

    @property
    def reply_context_enabled(self) -> bool:
        """Reply detection needs a GroupMe access token for history lookups."""
        return bool(self.groupme_access_token)

    def missing_settings(self) -> list[str]:
        """Names of unset environment variables, for startup warnings."""
        missing = []
        if not self.discord_webhook_url:
            missing.append("DISCORD_WEBHOOK_URL")
        if not self.groupme_bot_id:
            missing.append("GROUPME_BOT_ID")
        if not self.groupme_access_token:
            missing.append("GROUPME_ACCESS_TOKEN")
        return missing
