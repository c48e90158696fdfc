"""Discord OAuth2 provider.

Configures the generic OAuth2 client for Discord's endpoints and adds
token revocation (RFC 7009), which Discord exposes at
/oauth2/token/revoke.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

import httpx

from discord_oauth.domain.models import AccessToken, DiscordResourceOwner

from .client import METHOD_POST, OAuth2Client
from .config import DiscordProviderConfig
from .exceptions import DiscordIdentityProviderError
from .provider import ProviderAdapter
from .revocation import build_revocation_params

logger = logging.getLogger(__name__)

DEFAULT_SCOPES = ("identify", "email", "connections", "guilds", "guilds.join")


class DiscordProvider(ProviderAdapter):
    """Discord OAuth2 provider.

    Example:
        provider = DiscordProvider(DiscordProviderConfig(
            client_id="...",
            client_secret="...",
            redirect_uri="https://example.com/callback",
        ))
        url, state = provider.authorization_url()
        token = await provider.get_access_token("authorization_code", code=code)
        user = await provider.get_resource_owner(token)
        await provider.revoke_refresh_token(token.refresh_token)
    """

    def __init__(
        self,
        config: DiscordProviderConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        scopes: Optional[Sequence[str]] = None,
    ):
        """Initialize Discord provider.

        Args:
            config: Client credentials and endpoint hosts
            http_client: Optional shared httpx client
            timeout: Request timeout in seconds
            scopes: Scopes to request by default (default: DEFAULT_SCOPES)
        """
        self.config = config
        self._scopes = tuple(scopes) if scopes is not None else DEFAULT_SCOPES
        self.client = OAuth2Client(self, http_client=http_client, timeout=timeout)

    @property
    def client_id(self) -> str:
        return self.config.client_id

    @property
    def client_secret(self) -> str:
        return self.config.client_secret

    @property
    def redirect_uri(self) -> str:
        return self.config.redirect_uri

    def base_authorization_url(self) -> str:
        return f"{self.config.host}/oauth2/authorize"

    def base_access_token_url(self, params: Mapping[str, Any]) -> str:
        return f"{self.config.api_domain}/oauth2/token"

    def base_revoke_token_url(self) -> str:
        return f"{self.config.api_domain}/oauth2/token/revoke"

    def resource_owner_details_url(self, token: AccessToken) -> str:
        return f"{self.config.api_domain}/users/@me"

    def scope_separator(self) -> str:
        """Discord joins scopes with a space (sent as %20), not a comma."""
        return " "

    def default_scopes(self) -> list[str]:
        """Scopes requested when the caller passes none.

        Not every scope Discord offers; just what a typical login needs.
        """
        return list(self._scopes)

    def authorization_headers(self, token: AccessToken) -> dict[str, str]:
        return {"Authorization": f"Bearer {token.access_token}"}

    def check_response(self, response: httpx.Response, data: Any) -> None:
        """Raise DiscordIdentityProviderError for 4xx/5xx responses."""
        if response.status_code >= 400:
            logger.warning(f"Discord error response | status={response.status_code}")
            raise DiscordIdentityProviderError.client_exception(response, data)

    def create_resource_owner(self, response: Mapping[str, Any], token: AccessToken) -> DiscordResourceOwner:
        return DiscordResourceOwner(response)

    # OAuth2 flow, delegated to the generic client

    def authorization_url(self, **options: Any) -> tuple[str, str]:
        """See OAuth2Client.authorization_url."""
        return self.client.authorization_url(**options)

    def get_authorization_url(self, **options: Any) -> str:
        """See OAuth2Client.get_authorization_url."""
        return self.client.get_authorization_url(**options)

    async def get_access_token(self, grant: str, **params: Any) -> AccessToken:
        """See OAuth2Client.get_access_token."""
        return await self.client.get_access_token(grant, **params)

    async def get_resource_owner(self, token: AccessToken) -> DiscordResourceOwner:
        """See OAuth2Client.get_resource_owner."""
        return await self.client.get_resource_owner(token)

    # Token revocation

    async def revoke_token(self, options: Mapping[str, Any]) -> None:
        """Request a token revocation.

        Args:
            options: Revocation parameters (token, token_type_hint); any key
                also overrides the client credentials sent by default

        Raises:
            InvalidTokenTypeHint: If token_type_hint is not a known token
                type (raised before any request is sent)
            DiscordIdentityProviderError: If Discord rejects the revocation
        """
        defaults = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        params = build_revocation_params(defaults, options)

        logger.info(
            f"Token revocation | client_id={params.get('client_id')} "
            f"token_type_hint={params.get('token_type_hint', '-')}"
        )

        request = self.client.build_form_request(METHOD_POST, self.base_revoke_token_url(), params)
        await self.client.get_parsed_response(request)

    async def revoke_access_token(self, access_token: str) -> None:
        """Revoke an access token.

        Discord currently also revokes the refresh token of the same grant.
        RFC 7009 leaves that optional and Discord does not document it, so
        revoke the refresh token when every token of the grant must go.
        """
        await self.revoke_token({
            "token": access_token,
            "token_type_hint": "access_token",
        })

    async def revoke_refresh_token(self, refresh_token: str) -> None:
        """Revoke a refresh token and every access token of the same grant."""
        await self.revoke_token({
            "token": refresh_token,
            "token_type_hint": "refresh_token",
        })
