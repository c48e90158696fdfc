"""OAuth2 provider exceptions."""

from typing import Any, Iterable, Optional

import httpx


class OAuth2Error(Exception):
    """Base exception for OAuth2 operations."""

    pass


class IdentityProviderError(OAuth2Error):
    """The identity provider answered with an error response.

    Attributes:
        message: Human-readable error summary
        status_code: HTTP status code of the failed response
        body: Parsed response body (mapping, or raw text when not JSON)
        response: The failed httpx response
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(message)
        self._message = message
        self._status_code = status_code
        self._body = body
        self._response = response

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def body(self) -> Any:
        return self._body

    @property
    def response(self) -> Optional[httpx.Response]:
        return self._response

    def __str__(self) -> str:
        return f"{self.message} (status {self.status_code})"


class DiscordIdentityProviderError(IdentityProviderError):
    """Discord returned a 4xx/5xx response."""

    @classmethod
    def client_exception(cls, response: httpx.Response, data: Any) -> "DiscordIdentityProviderError":
        """Build the error from a failed response and its parsed body.

        Discord reports errors in several shapes: OAuth2 errors carry
        ``error``/``error_description``, API errors carry ``message``, and
        form validation errors map field names to lists of messages. The
        body is kept verbatim either way.
        """
        message = response.reason_phrase
        if isinstance(data, dict):
            for key in ("message", "error_description", "error"):
                detail = data.get(key)
                if isinstance(detail, str) and detail:
                    message = detail
                    break

        return cls(message, response.status_code, data, response)


class InvalidTokenTypeHint(OAuth2Error, ValueError):
    """A revocation was requested with an unknown token_type_hint."""

    def __init__(self, hint: Any, allowed: Iterable[str]):
        self.hint = hint
        self.allowed = tuple(allowed)
        super().__init__(
            f'Invalid token type hint "{hint}". '
            f"The possible options are: {', '.join(self.allowed)}"
        )


class UnexpectedResponseError(OAuth2Error):
    """The provider response could not be interpreted."""

    pass


__all__ = [
    "OAuth2Error",
    "IdentityProviderError",
    "DiscordIdentityProviderError",
    "InvalidTokenTypeHint",
    "UnexpectedResponseError",
]
