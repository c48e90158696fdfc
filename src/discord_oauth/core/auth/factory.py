"""Discord provider factory.

Instantiates the provider from environment configuration.
"""

import logging
from typing import Optional

from discord_oauth.config.settings import Settings, get_settings

from .config import DiscordProviderConfig
from .discord import DiscordProvider

logger = logging.getLogger(__name__)

# Global provider instance (initialized on first call)
_provider_instance: Optional[DiscordProvider] = None


def get_discord_provider(settings: Optional[Settings] = None) -> DiscordProvider:
    """Get the configured Discord provider instance.

    Configuration comes from DISCORD_* environment variables:
    - DISCORD_CLIENT_ID, DISCORD_CLIENT_SECRET (required)
    - DISCORD_REDIRECT_URI
    - DISCORD_HOST, DISCORD_API_DOMAIN (default: discord.com, API v9)
    - DISCORD_HTTP_TIMEOUT, DISCORD_SCOPES

    Args:
        settings: Settings to use instead of the environment

    Returns:
        Configured DiscordProvider instance

    Raises:
        ValueError: If client credentials are missing
    """
    global _provider_instance

    # Return cached instance
    if _provider_instance is not None:
        return _provider_instance

    settings = settings or get_settings()

    if not all([settings.client_id, settings.client_secret]):
        raise ValueError(
            "Discord provider requires: DISCORD_CLIENT_ID, DISCORD_CLIENT_SECRET"
        )

    config = DiscordProviderConfig(
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        redirect_uri=settings.redirect_uri,
        host=settings.host,
        api_domain=settings.api_domain,
    )
    _provider_instance = DiscordProvider(
        config,
        timeout=settings.http_timeout,
        scopes=settings.scopes,
    )

    logger.info(f"Discord provider initialized: api_domain={config.api_domain}")
    return _provider_instance


def reset_provider() -> None:
    """Reset the global provider instance (for testing)."""
    global _provider_instance
    _provider_instance = None
