"""Domain models for the Discord OAuth2 provider"""

from discord_oauth.domain.models.resource_owner import DiscordResourceOwner
from discord_oauth.domain.models.token import AccessToken

__all__ = [
    "AccessToken",
    "DiscordResourceOwner",
]
