"""
Pytest configuration and common fixtures for wasend tests.

Provides a fake aiohttp session that records every request and replays
queued responses, plus ready-wired client, media handler and messenger.
"""

import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any

import pytest

from wasend.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wasend.messaging.whatsapp.handlers.whatsapp_media_handler import (
    WhatsAppMediaHandler,
)
from wasend.messaging.whatsapp.messenger.whatsapp_messenger import WhatsAppMessenger

TEST_TOKEN = "test_token_abcdef"
TEST_PHONE_ID = "1234567890"
TEST_BASE_URL = "https://graph.test/"
TEST_API_VERSION = "v21.0"

MESSAGES_URL = f"https://graph.test/{TEST_API_VERSION}/{TEST_PHONE_ID}/messages"
UPLOAD_URL = f"https://graph.test/{TEST_API_VERSION}/{TEST_PHONE_ID}/media"


def send_ack(recipient: str = "5215512345678", message_id: str = "wamid.TEST") -> dict:
    """Typical acknowledgment body of the messages endpoint."""
    return {
        "messaging_product": "whatsapp",
        "contacts": [{"input": recipient, "wa_id": recipient}],
        "messages": [{"id": message_id}],
    }


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside ``async with``."""

    def __init__(
        self,
        status: int = 200,
        body: bytes = b"",
        error: BaseException | None = None,
    ):
        self.status = status
        self._body = body
        self._error = error

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


@dataclass
class RecordedRequest:
    method: str
    url: str
    kwargs: dict[str, Any] = field(default_factory=dict)

    @property
    def headers(self) -> dict[str, str]:
        return self.kwargs.get("headers", {})

    @property
    def json(self) -> Any:
        return self.kwargs.get("json")


class FakeSession:
    """Minimal aiohttp.ClientSession replacement."""

    def __init__(self):
        self.requests: list[RecordedRequest] = []
        self._responses: deque[FakeResponse] = deque()

    def queue(
        self,
        status: int = 200,
        json_body: Any = None,
        body: bytes | str | None = None,
        error: BaseException | None = None,
    ) -> None:
        if json_body is not None:
            raw = json.dumps(json_body).encode()
        elif isinstance(body, str):
            raw = body.encode()
        else:
            raw = body or b""
        self._responses.append(FakeResponse(status=status, body=raw, error=error))

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append(RecordedRequest(method, url, kwargs))
        if not self._responses:
            raise AssertionError(f"Unexpected {method} {url}: no response queued")
        return self._responses.popleft()

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session) -> WhatsAppClient:
    return WhatsAppClient(
        session=fake_session,
        access_token=TEST_TOKEN,
        phone_number_id=TEST_PHONE_ID,
        base_url=TEST_BASE_URL,
        api_version=TEST_API_VERSION,
    )


@pytest.fixture
def media_handler(client) -> WhatsAppMediaHandler:
    return WhatsAppMediaHandler(client=client)


@pytest.fixture
def messenger(client, media_handler) -> WhatsAppMessenger:
    return WhatsAppMessenger(client=client, media_handler=media_handler)


@pytest.fixture
def media_file(tmp_path):
    """A small local file to upload."""
    path = tmp_path / "voice.ogg"
    path.write_bytes(b"OggS\x00fake-audio")
    return path
