"""Discord OAuth2 provider

Discord endpoints, user mapping, error mapping and token revocation on
top of a small httpx-based OAuth2 client.
"""

from discord_oauth.core.auth import (
    DiscordIdentityProviderError,
    DiscordProvider,
    DiscordProviderConfig,
    InvalidTokenTypeHint,
    get_discord_provider,
)
from discord_oauth.domain.models import AccessToken, DiscordResourceOwner

__version__ = "1.0.0"

__all__ = [
    "AccessToken",
    "DiscordIdentityProviderError",
    "DiscordProvider",
    "DiscordProviderConfig",
    "DiscordResourceOwner",
    "InvalidTokenTypeHint",
    "get_discord_provider",
]
