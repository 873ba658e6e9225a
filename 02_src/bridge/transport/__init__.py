"""Transport module."""

from .http_transport import HttpxTransport, ITransport, RequestSpec, TransportResponse

__all__ = ["HttpxTransport", "ITransport", "RequestSpec", "TransportResponse"]
