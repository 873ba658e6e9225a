"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import BridgeConfig
from .delivery import DiscordWebhookDelivery, GroupMeBotDelivery
from .discord_relay import DiscordRelay
from .history import HistoryFetcher
from .logging_config import get_logger
from .resolution import IResolutionOrchestrator, ResolutionOrchestrator
from .transport import HttpxTransport, ITransport

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    @property
    def config(self) -> BridgeConfig:
        ...

    @property
    def orchestrator(self) -> IResolutionOrchestrator:
        ...

    @property
    def discord_relay(self) -> DiscordRelay:
        ...

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        config: BridgeConfig | None = None,
        transport: ITransport | None = None,
    ):
        self._config = config or BridgeConfig.from_env()
        self._injected_transport = transport

        # Components (will be initialized in start())
        self._transport: ITransport | None = None
        self._history: HistoryFetcher | None = None
        self._discord_delivery: DiscordWebhookDelivery | None = None
        self._groupme_delivery: GroupMeBotDelivery | None = None
        self._orchestrator: ResolutionOrchestrator | None = None
        self._discord_relay: DiscordRelay | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting GroupMe-Discord bridge")
        for name in self._config.missing_settings():
            logger.warning("%s not set", name)

        # 1. Transport (no dependencies)
        self._transport = self._injected_transport or HttpxTransport(
            timeout=self._config.http_timeout
        )

        # 2. History (optional, needs the access token)
        if self._config.reply_context_enabled:
            self._history = HistoryFetcher(
                self._transport, self._config.groupme_access_token
            )
            logger.info("Reply context detection enabled")

        # 3. Deliveries (depend on Transport)
        self._discord_delivery = DiscordWebhookDelivery(
            self._transport, self._config.discord_webhook_url
        )
        self._groupme_delivery = GroupMeBotDelivery(
            self._transport, self._config.groupme_bot_id
        )

        # 4. Handlers
        self._orchestrator = ResolutionOrchestrator(
            delivery=self._discord_delivery, history=self._history
        )
        self._discord_relay = DiscordRelay(self._groupme_delivery)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._discord_relay = None
        self._orchestrator = None
        if self._transport and self._injected_transport is None:
            await self._transport.aclose()
            logger.info("HTTP transport closed")
        self._transport = None

    @property
    def config(self) -> BridgeConfig:
        return self._config

    @property
    def orchestrator(self) -> ResolutionOrchestrator:
        """Get the GroupMe event orchestrator."""
        if not self._orchestrator:
            raise RuntimeError("Application not started")
        return self._orchestrator

    @property
    def discord_relay(self) -> DiscordRelay:
        """Get the Discord relay."""
        if not self._discord_relay:
            raise RuntimeError("Application not started")
        return self._discord_relay
