"""Provider adapter interface.

This module defines the hooks a provider adapter supplies to the generic
OAuth2 client. The client owns the protocol (authorization URL, grants,
response parsing); the adapter owns everything provider-specific.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx

from discord_oauth.domain.models import AccessToken


class ProviderAdapter(ABC):
    """Abstract interface for OAuth2 provider adapters.

    Example:
        adapter = DiscordProvider(config)
        client = OAuth2Client(adapter)
        url = client.get_authorization_url(state="xyz")
    """

    @property
    @abstractmethod
    def client_id(self) -> str:
        """OAuth2 client ID"""
        pass

    @property
    @abstractmethod
    def client_secret(self) -> str:
        """OAuth2 client secret"""
        pass

    @property
    @abstractmethod
    def redirect_uri(self) -> str:
        """Registered redirect URI"""
        pass

    @abstractmethod
    def base_authorization_url(self) -> str:
        """URL the user is redirected to in order to grant access."""
        pass

    @abstractmethod
    def base_access_token_url(self, params: Mapping[str, Any]) -> str:
        """Token endpoint URL.

        Args:
            params: Token request parameters (for providers whose token
                endpoint depends on the grant)
        """
        pass

    @abstractmethod
    def resource_owner_details_url(self, token: AccessToken) -> str:
        """User-info endpoint URL."""
        pass

    @abstractmethod
    def scope_separator(self) -> str:
        """String used to join scopes in the authorization URL."""
        pass

    @abstractmethod
    def default_scopes(self) -> list[str]:
        """Scopes requested when the caller does not pass any."""
        pass

    @abstractmethod
    def authorization_headers(self, token: AccessToken) -> dict[str, str]:
        """Headers that authenticate a request with the given token."""
        pass

    @abstractmethod
    def check_response(self, response: httpx.Response, data: Any) -> None:
        """Check a provider response for errors.

        Args:
            response: Raw HTTP response
            data: Parsed response body

        Raises:
            IdentityProviderError: If the response is an error
        """
        pass

    @abstractmethod
    def create_resource_owner(self, response: Mapping[str, Any], token: AccessToken) -> Any:
        """Build the resource owner from a successful user-info response."""
        pass
