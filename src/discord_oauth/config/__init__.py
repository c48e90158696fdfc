"""Configuration for the Discord OAuth2 provider"""

from discord_oauth.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
