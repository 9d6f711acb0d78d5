"""
Shared fixtures: a recording httpx mock transport and a Context7 client
wired to it.
"""

import httpx
import pytest
import pytest_asyncio

from context_seven.config import Context7Settings
from context_seven.services import Context7Client

TEST_SOURCE_HEADER = "mcp-server-test"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code=200, text=None, json=None, exc=None):
        self.status_code = status_code
        self.text = text
        self.json = json
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, text=self.text or "")

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


@pytest.fixture
def context7_settings():
    return Context7Settings(
        CONTEXT7_API_BASE_URL="https://context7.com/api",
        CONTEXT7_SOURCE_HEADER=TEST_SOURCE_HEADER,
    )


@pytest_asyncio.fixture
async def mock_http_client():
    """Factory for AsyncClients on a MockTransport, closed after the test."""
    clients = []

    def _make(handler: RecordingHandler) -> httpx.AsyncClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return http_client

    yield _make

    for http_client in clients:
        await http_client.aclose()


@pytest.fixture
def make_client(context7_settings, mock_http_client):
    """Factory building a Context7Client around a RecordingHandler."""

    def _make(handler: RecordingHandler) -> Context7Client:
        return Context7Client(context7_settings, http_client=mock_http_client(handler))

    return _make
