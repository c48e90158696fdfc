"""
Pytest configuration and fixtures for Discord OAuth2 provider tests.

Provides fixtures for:
- Provider configuration
- A recording mock HTTP transport
- Providers wired to the mock transport
"""

from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from discord_oauth.core.auth import DiscordProvider, DiscordProviderConfig, reset_provider
from discord_oauth.config.settings import get_settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests with no network access")


class RecordingTransport(httpx.MockTransport):
    """Mock transport that replays queued responses and records requests."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.pop(0)


@pytest.fixture
def provider_config() -> DiscordProviderConfig:
    """Create provider config with test credentials"""
    return DiscordProviderConfig(
        client_id="mock_client_id",
        client_secret="mock_secret",
        redirect_uri="none",
    )


@pytest.fixture
def provider(provider_config) -> DiscordProvider:
    """Create provider with no HTTP client (for URL building tests)"""
    return DiscordProvider(provider_config)


@pytest_asyncio.fixture
async def make_provider(provider_config) -> AsyncGenerator[Callable[..., tuple], None]:
    """Build a provider whose requests are answered by the given responses.

    Returns a (provider, transport) pair; transport.requests holds what
    was sent.
    """
    clients = []

    def _make(*responses: httpx.Response):
        transport = RecordingTransport(*responses)
        http_client = httpx.AsyncClient(transport=transport)
        clients.append(http_client)
        return DiscordProvider(provider_config, http_client=http_client), transport

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture(autouse=True)
def clear_cached_provider():
    """Reset cached settings and provider between tests"""
    reset_provider()
    get_settings.cache_clear()
    yield
    reset_provider()
    get_settings.cache_clear()
