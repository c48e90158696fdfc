"""Unit tests for OAuth2Client

Tests grant validation, response parsing and transport selection.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from discord_oauth.core.auth import OAuth2Client
from discord_oauth.core.auth.client import generate_state
from discord_oauth.core.auth.exceptions import UnexpectedResponseError


@pytest.mark.unit
class TestGrantValidation:
    """Test grant parameter checks (no request is sent)"""

    @pytest.mark.asyncio
    async def test_unknown_grant(self, make_provider):
        provider, transport = make_provider()

        with pytest.raises(ValueError, match="Unsupported grant: password"):
            await provider.get_access_token("password", username="u", password="p")

        assert transport.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("grant", ["authorization_code", "refresh_token"])
    async def test_missing_required_param(self, make_provider, grant):
        provider, transport = make_provider()

        with pytest.raises(ValueError, match="Required parameter not passed"):
            await provider.get_access_token(grant)

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_client_credentials(self, make_provider):
        """client_credentials needs no extra parameters"""
        provider, transport = make_provider(httpx.Response(200, json={"access_token": "app", "token_type": "Bearer"}))

        token = await provider.get_access_token("client_credentials", scope="identify connections")

        assert token.access_token == "app"
        assert b"grant_type=client_credentials" in transport.requests[0].content


@pytest.mark.unit
class TestParseResponse:
    """Test response body decoding"""

    def test_json(self):
        assert OAuth2Client.parse_response(httpx.Response(200, json={"a": 1})) == {"a": 1}

    def test_empty_body(self):
        assert OAuth2Client.parse_response(httpx.Response(200, content=b"")) == {}

    def test_plain_text(self):
        response = httpx.Response(502, content=b"Bad Gateway", headers={"content-type": "text/plain"})

        assert OAuth2Client.parse_response(response) == "Bad Gateway"

    def test_malformed_json(self):
        """Bad input: declared JSON that does not parse"""
        response = httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})

        with pytest.raises(UnexpectedResponseError):
            OAuth2Client.parse_response(response)

    @pytest.mark.asyncio
    async def test_non_object_token_response(self, make_provider):
        """Bad input: token endpoint returns something other than an object"""
        provider, _ = make_provider(httpx.Response(200, content=b"ok", headers={"content-type": "text/plain"}))

        with pytest.raises(UnexpectedResponseError, match="Expected JSON"):
            await provider.get_access_token("authorization_code", code="c")


@pytest.mark.unit
class TestTransport:
    """Test which HTTP client sends the request"""

    @pytest.mark.asyncio
    async def test_short_lived_client(self, provider):
        """Without a shared client a new AsyncClient is used per request"""
        mock_client = AsyncMock()
        mock_client.send.return_value = httpx.Response(200, json={})
        mock_client.__aenter__.return_value = mock_client

        with patch("discord_oauth.core.auth.client.httpx.AsyncClient", return_value=mock_client) as mock_cls:
            await provider.revoke_access_token("tok")

        mock_cls.assert_called_once_with(timeout=10.0)
        mock_client.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, provider_config):
        """Connection failures surface unchanged"""
        from discord_oauth.core.auth import DiscordProvider

        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(fail)) as http_client:
            provider = DiscordProvider(provider_config, http_client=http_client)

            with pytest.raises(httpx.ConnectError):
                await provider.revoke_access_token("tok")


def test_generate_state():
    state = generate_state()

    assert len(state) == 32
    assert state != generate_state()
