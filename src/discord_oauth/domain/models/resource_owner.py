"""Discord resource owner (the authenticated user)."""

from typing import Any, Mapping, Optional


class DiscordResourceOwner:
    """Read-only view over the user object returned by /users/@me

    The wrapped data is kept exactly as Discord returned it; accessors
    return None for keys the granted scopes did not expose (e.g. ``email``
    without the ``email`` scope).
    """

    def __init__(self, response: Mapping[str, Any]):
        self._response = dict(response)

    @property
    def id(self) -> Optional[str]:
        """Snowflake ID of the user"""
        return self._response.get("id")

    @property
    def username(self) -> Optional[str]:
        return self._response.get("username")

    @property
    def discriminator(self) -> Optional[str]:
        """Four-digit tag ("0" for users migrated to unique usernames)"""
        return self._response.get("discriminator")

    @property
    def avatar_hash(self) -> Optional[str]:
        return self._response.get("avatar")

    @property
    def verified(self) -> Optional[bool]:
        """Whether the email on the account has been verified"""
        return self._response.get("verified")

    @property
    def email(self) -> Optional[str]:
        return self._response.get("email")

    @property
    def global_name(self) -> Optional[str]:
        return self._response.get("global_name")

    @property
    def locale(self) -> Optional[str]:
        return self._response.get("locale")

    @property
    def mfa_enabled(self) -> Optional[bool]:
        return self._response.get("mfa_enabled")

    def to_dict(self) -> dict:
        """Return all of the owner details"""
        return dict(self._response)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscordResourceOwner):
            return NotImplemented
        return self._response == other._response

    def __repr__(self) -> str:
        return f"DiscordResourceOwner(id={self.id!r}, username={self.username!r})"
