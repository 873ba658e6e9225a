"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bridge.models import InboundMessage, SenderType  # noqa: E402
from bridge.transport import RequestSpec, TransportResponse  # noqa: E402


class FakeTransport:
    """ITransport double that records requests and replays canned responses."""

    def __init__(self):
        self.requests: list[RequestSpec] = []
        self.responses: list[TransportResponse] = []
        self.error: Exception | None = None
        self.closed = False

    async def request(self, spec: RequestSpec) -> TransportResponse:
        self.requests.append(spec)
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return TransportResponse(status_code=204, url=spec.url)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport():
    """Create a recording transport."""
    return FakeTransport()


@pytest.fixture
def history_response():
    """Build a GroupMe history response from raw message dicts."""

    def _build(messages: list[dict], status_code: int = 200) -> TransportResponse:
        body = json.dumps({"response": {"count": len(messages), "messages": messages}})
        return TransportResponse(status_code=status_code, body=body)

    return _build


@pytest.fixture
def make_message():
    """Factory for InboundMessage with sensible defaults."""

    def _make(**overrides) -> InboundMessage:
        fields = {
            "id": "100",
            "group_id": "g1",
            "user_id": "u2",
            "name": "Bob",
            "text": "hello",
            "sender_type": SenderType.USER,
        }
        fields.update(overrides)
        return InboundMessage(**fields)

    return _make


@pytest.fixture
def groupme_payload():
    """Raw GroupMe bot callback body."""
    return {
        "attachments": [],
        "avatar_url": "https://i.groupme.com/avatar.jpeg",
        "created_at": 1302623328,
        "group_id": "1234567890",
        "id": "1234567890",
        "name": "John",
        "sender_id": "12345",
        "sender_type": "user",
        "source_guid": "GUID",
        "system": False,
        "text": "Hello world",
        "user_id": "12345",
    }


@pytest.fixture
def mock_discord_delivery():
    """Create mock Discord delivery."""
    delivery = Mock()
    delivery.send_message = AsyncMock(return_value=True)
    delivery.send_reaction = AsyncMock(return_value=True)
    return delivery


@pytest.fixture
def mock_history():
    """Create mock history fetcher returning an empty window."""
    history = Mock()
    history.fetch_history = AsyncMock(return_value=[])
    return history
