"""Discord OAuth2 provider.

- provider: Adapter interface the OAuth2 client calls back into
- client: Generic OAuth2 client (authorization URL, grants, user info)
- discord: Discord adapter, including token revocation
"""

from .client import OAuth2Client, generate_state
from .config import DiscordProviderConfig
from .discord import DEFAULT_SCOPES, DiscordProvider
from .exceptions import (
    DiscordIdentityProviderError,
    IdentityProviderError,
    InvalidTokenTypeHint,
    OAuth2Error,
    UnexpectedResponseError,
)
from .factory import get_discord_provider, reset_provider
from .provider import ProviderAdapter
from .revocation import RevocationParams, allowed_token_type_hints, build_revocation_params

__all__ = [
    "DEFAULT_SCOPES",
    "DiscordIdentityProviderError",
    "DiscordProvider",
    "DiscordProviderConfig",
    "IdentityProviderError",
    "InvalidTokenTypeHint",
    "OAuth2Client",
    "OAuth2Error",
    "ProviderAdapter",
    "RevocationParams",
    "UnexpectedResponseError",
    "allowed_token_type_hints",
    "build_revocation_params",
    "generate_state",
    "get_discord_provider",
    "reset_provider",
]
