"""GroupMe-Discord bridge."""

from .app import Application, IApplication
from .config import BridgeConfig
from .delivery import (
    DiscordWebhookDelivery,
    GroupMeBotDelivery,
    IDiscordDelivery,
    IGroupMeDelivery,
)
from .discord_relay import DiscordRelay
from .errors import BridgeError, MalformedPayload, TransportFailure, UpstreamRejection
from .history import HistoryFetcher, IHistoryFetcher
from .models import (
    DiscordMessage,
    HandleResult,
    InboundMessage,
    ReactionEvent,
    ReplyContext,
)
from .resolution import (
    ResolutionOrchestrator,
    StructuredReplyResolver,
    detect_heuristic_reply,
)
from .reactions import extract_reaction
from .transport import HttpxTransport, ITransport

__all__ = [
    # Application
    "Application",
    "IApplication",
    "BridgeConfig",
    # Models
    "DiscordMessage",
    "HandleResult",
    "InboundMessage",
    "ReactionEvent",
    "ReplyContext",
    # Errors
    "BridgeError",
    "MalformedPayload",
    "TransportFailure",
    "UpstreamRejection",
    # Components
    "ITransport",
    "HttpxTransport",
    "IHistoryFetcher",
    "HistoryFetcher",
    "StructuredReplyResolver",
    "detect_heuristic_reply",
    "extract_reaction",
    "ResolutionOrchestrator",
    "IDiscordDelivery",
    "DiscordWebhookDelivery",
    "IGroupMeDelivery",
    "GroupMeBotDelivery",
    "DiscordRelay",
]
