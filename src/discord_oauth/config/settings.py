"""Configuration Settings for the Discord OAuth2 provider

Manages environment variables and provider configuration.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Provider settings, read from DISCORD_* environment variables"""

    # Application credentials (from the Discord developer portal)
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: str = ""

    # Endpoints
    host: str = "https://discord.com"
    api_domain: str = "https://discord.com/api/v9"

    # HTTP
    http_timeout: float = 10.0  # seconds

    # Overrides the provider's default scopes when set
    scopes: Optional[list[str]] = None

    class Config:
        env_prefix = "DISCORD_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Returns:
        Settings instance
    """
    return Settings()
