"""API routes."""

from .status import create_status_router
from .webhooks import create_webhooks_router

__all__ = ["create_status_router", "create_webhooks_router"]
