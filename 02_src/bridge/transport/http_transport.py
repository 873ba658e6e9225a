"""HTTP transport used for every outbound call."""

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from ..config import USER_AGENT
from ..errors import TransportFailure, UpstreamRejection


@dataclass(frozen=True)
class RequestSpec:
    """Description of one outbound HTTP request."""

    method: str
    url: str
    params: dict[str, Any] = field(default_factory=dict)
    json: Any = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of a completed request."""

    status_code: int
    body: str = ""
    url: str | None = None

    @property
    def ok(self) -> bool:
        return self.status_code < 300

    def json(self) -> Any:
        """Decode the body. Raises ValueError on invalid JSON."""
        return json.loads(self.body)

    def raise_for_status(self) -> None:
        if not self.ok:
            raise UpstreamRejection(self.status_code, self.url)


class ITransport(Protocol):
    """Abstraction over outbound HTTP."""

    async def request(self, spec: RequestSpec) -> TransportResponse:
        """Perform the request. Raises TransportFailure on network errors."""
        ...

    async def aclose(self) -> None:
        """Release connections."""
        ...


class HttpxTransport:
    """ITransport backed by a shared httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
        )

    async def request(self, spec: RequestSpec) -> TransportResponse:
        """Send the request and return its status and body."""
        try:
            response = await self._client.request(
                spec.method,
                spec.url,
                params=spec.params or None,
                json=spec.json,
                headers=spec.headers or None,
            )
        except httpx.HTTPError as e:
            raise TransportFailure(f"{spec.method} {spec.url} failed: {e}") from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            url=spec.url,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
