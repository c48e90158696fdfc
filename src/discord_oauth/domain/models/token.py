"""OAuth2 Access Token Model

Purpose: Represent the token issued by a provider's token endpoint

Key Components:
- AccessToken: Parsed token endpoint response
"""

import time
from dataclasses import dataclass, field
from typing import Any, Optional

# Keys lifted into AccessToken attributes; everything else lands in `values`
_TOKEN_FIELDS = ("access_token", "token_type", "refresh_token", "expires_in", "expires", "scope")


@dataclass
class AccessToken:
    """Access token issued by an OAuth2 provider

    Attributes:
        access_token: The token value sent as the bearer credential
        token_type: Token type reported by the provider (usually "Bearer")
        refresh_token: Refresh token, when the grant issued one
        expires: Expiration as a UNIX timestamp (seconds), when known
        scope: Granted scopes as reported by the provider
        resource_owner_id: Owner identifier, when the provider returns one
        values: Any other fields of the token response
    """
    access_token: str
    token_type: Optional[str] = None
    refresh_token: Optional[str] = None
    expires: Optional[int] = None
    scope: Optional[str] = None
    resource_owner_id: Optional[str] = None
    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: dict, resource_owner_id: Optional[str] = None) -> 'AccessToken':
        """Create from a parsed token endpoint response

        Raises:
            ValueError: If the response has no access_token
        """
        if not data.get("access_token"):
            raise ValueError('Required option not passed: "access_token"')

        expires = None
        if data.get("expires_in") is not None:
            expires = int(time.time()) + int(data["expires_in"])
        elif data.get("expires") is not None:
            expires = int(data["expires"])

        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type"),
            refresh_token=data.get("refresh_token"),
            expires=expires,
            scope=data.get("scope"),
            resource_owner_id=resource_owner_id,
            values={k: v for k, v in data.items() if k not in _TOKEN_FIELDS},
        )

    def to_dict(self) -> dict:
        """Convert to a token-response shaped dictionary"""
        data = dict(self.values)
        data["access_token"] = self.access_token
        for key in ("token_type", "refresh_token", "expires", "scope", "resource_owner_id"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @property
    def is_expired(self) -> bool:
        """Check if token is expired (False when no expiry is known)"""
        if self.expires is None:
            return False
        return self.expires < time.time()

    def __str__(self) -> str:
        return self.access_token
