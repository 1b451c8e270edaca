"""
Pytest configuration and fixtures
"""

import asyncio

import pytest

from httpreq import ClientConfig, HttpRequestClient, TransportResponse
from httpreq.http.adapter import AsyncTransport


class DummyTransport(AsyncTransport):
    """In-memory async transport recording every request."""

    def __init__(self, response=None, error=None, delay=0.0):
        self.requests = []
        self.response = response or TransportResponse(
            status=200,
            headers={"X-Request-Id": "req_test_123"},
            content={"id": "item_1"},
        )
        self.error = error
        self.delay = delay
        self.cancelled = False
        self.closed = False

    async def send(self, request):
        self.requests.append(request)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def transport():
    """Create dummy transport fixture"""
    return DummyTransport()


@pytest.fixture
def test_config():
    """Create test configuration fixture"""
    return ClientConfig(base_url="https://api.example.com", timeout_millis=1000)


@pytest.fixture
def async_client(test_config, transport):
    """Create async client over the dummy transport"""
    return HttpRequestClient(test_config, transport=transport)
