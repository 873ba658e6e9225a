"""Webhook API routes."""

from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...app import IApplication
from ...errors import MalformedPayload
from ...logging_config import get_logger
from ...models import HandleResult

logger = get_logger(__name__)

Handler = Callable[[Any], Awaitable[HandleResult]]


async def _dispatch(request: Request, handler: Handler) -> JSONResponse:
    """Decode the body, run the handler and map its result to a status."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON"})

    try:
        result = await handler(body)
    except MalformedPayload as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception:
        logger.exception("Error processing request")
        return JSONResponse(
            status_code=500, content={"error": "Internal server error"}
        )

    return JSONResponse(
        status_code=200 if result.success else 500,
        content=result.to_dict(),
    )


def create_webhooks_router(app: IApplication) -> APIRouter:
    """Create webhooks router."""
    router = APIRouter(tags=["webhooks"])

    @router.post("/groupme")
    async def groupme_webhook(request: Request) -> JSONResponse:
        """GroupMe bot callback."""
        return await _dispatch(request, app.orchestrator.handle_inbound)

    @router.post("/discord")
    async def discord_webhook(request: Request) -> JSONResponse:
        """Discord messages to relay into GroupMe."""
        return await _dispatch(request, app.discord_relay.handle_inbound)

    return router
