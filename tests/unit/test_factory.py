"""Unit tests for settings and the provider factory"""

import pytest

from discord_oauth.config.settings import Settings, get_settings
from discord_oauth.core.auth import DiscordProvider, get_discord_provider, reset_provider


@pytest.mark.unit
class TestSettings:
    """Test environment configuration"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DISCORD_HOST", raising=False)
        monkeypatch.delenv("DISCORD_API_DOMAIN", raising=False)

        settings = Settings(_env_file=None)

        assert settings.host == "https://discord.com"
        assert settings.api_domain == "https://discord.com/api/v9"
        assert settings.http_timeout == 10.0

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DISCORD_CLIENT_ID", "env_id")
        monkeypatch.setenv("DISCORD_CLIENT_SECRET", "env_secret")
        monkeypatch.setenv("DISCORD_SCOPES", '["identify", "guilds"]')

        settings = get_settings()

        assert settings.client_id == "env_id"
        assert settings.client_secret == "env_secret"
        assert settings.scopes == ["identify", "guilds"]


@pytest.mark.unit
class TestGetDiscordProvider:
    """Test provider construction from settings"""

    def test_from_settings(self):
        settings = Settings(
            _env_file=None,
            client_id="id",
            client_secret="secret",
            redirect_uri="https://example.com/callback",
            api_domain="https://discord.com/api/v10",
            scopes=["identify"],
        )

        provider = get_discord_provider(settings)

        assert isinstance(provider, DiscordProvider)
        assert provider.client_id == "id"
        assert provider.redirect_uri == "https://example.com/callback"
        assert provider.base_access_token_url({}) == "https://discord.com/api/v10/oauth2/token"
        assert provider.default_scopes() == ["identify"]

    def test_cached(self):
        settings = Settings(_env_file=None, client_id="id", client_secret="secret")

        assert get_discord_provider(settings) is get_discord_provider()

    def test_reset(self):
        settings = Settings(_env_file=None, client_id="id", client_secret="secret")
        first = get_discord_provider(settings)

        reset_provider()

        assert get_discord_provider(settings) is not first

    def test_missing_credentials(self, monkeypatch):
        """Bad input: credentials are required"""
        monkeypatch.delenv("DISCORD_CLIENT_SECRET", raising=False)

        with pytest.raises(ValueError, match="DISCORD_CLIENT_ID, DISCORD_CLIENT_SECRET"):
            get_discord_provider(Settings(_env_file=None, client_id="id"))
