"""Error types shared across the bridge."""


class BridgeError(Exception):
    """Base class for bridge errors."""


class TransportFailure(BridgeError):
    """Network-level failure (DNS, connection, timeout)."""


class UpstreamRejection(BridgeError):
    """Remote API answered with a non-success status."""

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Upstream returned {status_code} for {url or 'request'}")


class MalformedPayload(BridgeError, ValueError):
    """Inbound webhook body does not have the expected shape."""
