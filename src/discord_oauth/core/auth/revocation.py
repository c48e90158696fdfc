"""Token revocation parameters (RFC 7009).

Builds the request body for a revocation call and makes sure the optional
``token_type_hint`` names a token type the endpoint understands. Every
revocation request goes through ``build_revocation_params``.
"""

from typing import Any, Mapping, TypedDict

from .exceptions import InvalidTokenTypeHint

# OAuth Token Type Hints registry
TOKEN_TYPE_HINTS = ("access_token", "refresh_token")


class RevocationParams(TypedDict, total=False):
    """Body of a token revocation request."""
    client_id: str
    client_secret: str
    token: str
    token_type_hint: str


def allowed_token_type_hints() -> frozenset[str]:
    """Token types that can be passed as ``token_type_hint``."""
    return frozenset(TOKEN_TYPE_HINTS)


def build_revocation_params(
    defaults: Mapping[str, Any],
    options: Mapping[str, Any],
) -> RevocationParams:
    """Merge caller options over the required defaults.

    Keys in ``options`` override the same keys in ``defaults``; neither
    input is modified. A ``token_type_hint`` of ``None`` is treated as
    absent and left out of the result.

    Args:
        defaults: Required parameters (client credentials)
        options: Caller-supplied parameters (token, token_type_hint, ...)

    Returns:
        The merged parameters

    Raises:
        InvalidTokenTypeHint: If token_type_hint is not a known token type
    """
    provided = {**defaults, **options}

    if provided.get("token_type_hint") is None:
        provided.pop("token_type_hint", None)
    elif provided["token_type_hint"] not in TOKEN_TYPE_HINTS:
        raise InvalidTokenTypeHint(provided["token_type_hint"], TOKEN_TYPE_HINTS)

    return provided
