"""GroupMe message history lookups."""

from typing import Protocol

from ..config import GROUPME_API_URL
from ..errors import MalformedPayload, TransportFailure, UpstreamRejection
from ..logging_config import get_logger, log_context
from ..models import InboundMessage
from ..payloads import parse_groupme_message
from ..transport import ITransport, RequestSpec

logger = get_logger(__name__)


class IHistoryFetcher(Protocol):
    """Paginated access to earlier messages of a group."""

    async def fetch_history(
        self,
        group_id: str,
        before_id: str | None = None,
        limit: int = 20,
    ) -> list[InboundMessage]:
        """Most-recent-first messages strictly before `before_id`, at most `limit`."""
        ...


class HistoryFetcher:
    """Reads group history through the GroupMe v3 API.

    Any failure yields an empty list: callers treat it as "no information",
    never as "definitely no reply".
    """

    def __init__(
        self,
        transport: ITransport,
        access_token: str,
        api_url: str = GROUPME_API_URL,
    ):
        if not access_token:
            raise ValueError("GroupMe access token is required for history lookups")
        self._transport = transport
        self._access_token = access_token
        self._api_url = api_url.rstrip("/")

    async def fetch_history(
        self,
        group_id: str,
        before_id: str | None = None,
        limit: int = 20,
    ) -> list[InboundMessage]:
        """Fetch up to `limit` messages older than `before_id`."""
        params: dict[str, str | int] = {"token": self._access_token, "limit": limit}
        if before_id:
            params["before_id"] = before_id

        spec = RequestSpec(
            method="GET",
            url=f"{self._api_url}/groups/{group_id}/messages",
            params=params,
        )

        try:
            response = await self._transport.request(spec)
            response.raise_for_status()
            raw_messages = response.json()["response"]["messages"]
        except TransportFailure as e:
            logger.error("Error fetching GroupMe messages: %s", e)
            return []
        except UpstreamRejection as e:
            # GroupMe answers 304 when there is nothing before the cursor
            logger.warning(
                "GroupMe history unavailable: %s",
                e,
                extra=log_context(group_id=group_id, status_code=e.status_code),
            )
            return []
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Unexpected GroupMe history body: %s", e)
            return []

        if not isinstance(raw_messages, list):
            return []

        messages = []
        for raw in raw_messages[:limit]:
            try:
                messages.append(parse_groupme_message(raw))
            except MalformedPayload as e:
                logger.debug("Skipping history entry: %s", e)

        logger.debug(
            "Fetched %d history messages",
            len(messages),
            extra=log_context(group_id=group_id, before_id=before_id, limit=limit),
        )
        return messages
