"""Reply resolution module."""

from .heuristic import detect_heuristic_reply
from .orchestrator import IResolutionOrchestrator, ResolutionOrchestrator
from .structured import StructuredReplyResolver

__all__ = [
    "IResolutionOrchestrator",
    "ResolutionOrchestrator",
    "StructuredReplyResolver",
    "detect_heuristic_reply",
]
