"""Generic OAuth 2.0 client.

Implements the provider-independent parts of the authorization code flow:
- Authorization URL construction
- Token requests for the supported grants
- User-info retrieval with a bearer token
- Response parsing and error detection

Everything provider-specific is delegated to a ProviderAdapter.
"""

import json
import logging
import secrets
from typing import Any, Optional, Sequence, Union
from urllib.parse import quote, urlencode

import httpx

from discord_oauth.domain.models import AccessToken

from .exceptions import UnexpectedResponseError
from .provider import ProviderAdapter

logger = logging.getLogger(__name__)

METHOD_GET = "GET"
METHOD_POST = "POST"

# Parameters each grant type requires from the caller
GRANT_REQUIRED_PARAMS = {
    "authorization_code": ("code",),
    "refresh_token": ("refresh_token",),
    "client_credentials": (),
}


def generate_state() -> str:
    """Generate a random CSRF state value for the authorization request."""
    return secrets.token_hex(16)


class OAuth2Client:
    """OAuth 2.0 client driven by a provider adapter.

    Calls are independent of each other; the client holds no per-flow
    state. Pass an ``httpx.AsyncClient`` to share connections (or to
    plug in a mock transport), otherwise a short-lived client is opened
    for every request.
    """

    def __init__(
        self,
        adapter: ProviderAdapter,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        """Initialize OAuth2 client.

        Args:
            adapter: Provider adapter supplying endpoints and hooks
            http_client: Optional shared httpx client
            timeout: Request timeout in seconds (ignored with http_client)
        """
        self.adapter = adapter
        self.http_client = http_client
        self.timeout = timeout

    def authorization_url(
        self,
        state: Optional[str] = None,
        scope: Optional[Union[str, Sequence[str]]] = None,
        redirect_uri: Optional[str] = None,
        **params: Any,
    ) -> tuple[str, str]:
        """Build the URL to redirect the user to, with its state.

        Args:
            state: CSRF protection state (generated when omitted)
            scope: Scopes to request, as a list or a pre-joined string
                (default: the adapter's default scopes)
            redirect_uri: Callback URL (default: the adapter's)
            **params: Extra query parameters (e.g. prompt, guild_id)

        Returns:
            Tuple of (authorization_url, state); keep the state to check
            it against the one returned on the callback
        """
        state = state or generate_state()
        if scope is None:
            scope = self.adapter.default_scopes()
        if not isinstance(scope, str):
            scope = self.adapter.scope_separator().join(scope)

        query = {
            "state": state,
            "scope": scope,
            "response_type": "code",
            "approval_prompt": "auto",
            "redirect_uri": redirect_uri or self.adapter.redirect_uri,
            "client_id": self.adapter.client_id,
        }
        query.update(params)

        base_url = self.adapter.base_authorization_url()
        separator = "&" if "?" in base_url else "?"
        # RFC 3986: every reserved character is percent-encoded, space as %20
        encoded = urlencode(query, safe="", quote_via=quote)
        url = f"{base_url}{separator}{encoded}"
        return url, state

    def get_authorization_url(self, **options: Any) -> str:
        """Build the URL to redirect the user to.

        Same arguments as authorization_url. Pass your own state here,
        or use authorization_url to get the generated one back.
        """
        url, _ = self.authorization_url(**options)
        return url

    async def get_access_token(self, grant: str, **params: Any) -> AccessToken:
        """Request an access token from the token endpoint.

        Args:
            grant: Grant type (authorization_code, refresh_token, client_credentials)
            **params: Grant parameters (e.g. code="...")

        Returns:
            AccessToken parsed from the response

        Raises:
            ValueError: If the grant is unknown or a required parameter is missing
            IdentityProviderError: If the provider rejects the request
            UnexpectedResponseError: If the response is not a JSON object
        """
        if grant not in GRANT_REQUIRED_PARAMS:
            raise ValueError(
                f"Unsupported grant: {grant}. "
                f"Valid options: {', '.join(GRANT_REQUIRED_PARAMS)}"
            )
        for name in GRANT_REQUIRED_PARAMS[grant]:
            if not params.get(name):
                raise ValueError(f'Required parameter not passed: "{name}"')

        request_params = {
            "client_id": self.adapter.client_id,
            "client_secret": self.adapter.client_secret,
            "redirect_uri": self.adapter.redirect_uri,
            "grant_type": grant,
        }
        request_params.update(params)

        url = self.adapter.base_access_token_url(request_params)
        logger.info(f"Token request | grant={grant} client_id={self.adapter.client_id}")

        request = self.build_form_request(METHOD_POST, url, request_params)
        data = await self.get_parsed_response(request)

        if not isinstance(data, dict):
            raise UnexpectedResponseError(
                "Invalid response received from Authorization Server. Expected JSON."
            )

        return AccessToken.from_response(data)

    async def get_resource_owner(self, token: AccessToken) -> Any:
        """Fetch the resource owner for a token.

        Raises:
            IdentityProviderError: If the provider rejects the request
            UnexpectedResponseError: If the response is not a JSON object
        """
        url = self.adapter.resource_owner_details_url(token)
        request = httpx.Request(
            METHOD_GET,
            url,
            headers=self.adapter.authorization_headers(token),
        )
        data = await self.get_parsed_response(request)

        if not isinstance(data, dict):
            raise UnexpectedResponseError(
                "Invalid response received from Authorization Server. Expected JSON."
            )

        return self.adapter.create_resource_owner(data, token)

    def build_form_request(self, method: str, url: str, params: dict[str, Any]) -> httpx.Request:
        """Build a token-endpoint style request.

        Client credentials travel in the form-encoded body; no bearer
        header is attached.
        """
        return httpx.Request(
            method,
            url,
            data=params,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request over the shared client or a short-lived one."""
        logger.debug(f"{request.method} {request.url}")

        if self.http_client is not None:
            return await self.http_client.send(request)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.send(request)

    async def get_parsed_response(self, request: httpx.Request) -> Any:
        """Send a request and return its parsed body.

        The adapter's ``check_response`` sees every response before the
        body is returned.

        Raises:
            IdentityProviderError: If the adapter flags the response
            UnexpectedResponseError: If a JSON response cannot be decoded
        """
        response = await self.send(request)
        data = self.parse_response(response)

        self.adapter.check_response(response, data)
        return data

    @staticmethod
    def parse_response(response: httpx.Response) -> Any:
        """Decode a response body.

        Empty bodies parse to an empty dict. Bodies that are not JSON are
        returned as text, unless the response claims to be JSON.
        """
        content = response.text
        if not content.strip():
            return {}

        try:
            return json.loads(content)
        except ValueError as e:
            if "json" in response.headers.get("content-type", ""):
                raise UnexpectedResponseError(
                    f"Failed to parse JSON response: {e}"
                ) from e
            return content
