"""Discord provider configuration."""

from pydantic import BaseModel, field_validator

DEFAULT_HOST = "https://discord.com"
DEFAULT_API_DOMAIN = "https://discord.com/api/v9"


class DiscordProviderConfig(BaseModel):
    """Immutable configuration of a Discord provider instance.

    Attributes:
        client_id: OAuth2 client ID
        client_secret: OAuth2 client secret
        redirect_uri: Callback URL registered with the application
        host: Web host serving the authorization page
        api_domain: Versioned API base (token, revoke and user endpoints)
    """

    client_id: str
    client_secret: str
    redirect_uri: str = ""
    host: str = DEFAULT_HOST
    api_domain: str = DEFAULT_API_DOMAIN

    model_config = {"frozen": True}

    @field_validator("host", "api_domain")
    @classmethod
    def strip_trailing_slash(cls, v):
        """Endpoint paths are appended with a leading slash"""
        return v.rstrip("/")
