# =============================================================================
# core/identity.py  —  Token extraction for the `validate` tool
# =============================================================================
#
# READ THIS FIRST:
#   `validate` does NOT authenticate anybody.  Its job is "always answer with
#   the configured owner identity".  We still look for a bearer-token-like
#   value so the server can log whether the client sent one, but the answer
#   never depends on it.
#
# WHERE CLIENTS PUT THE TOKEN (checked in this order):
#   1. a direct key:   bearerToken, token, bearer_token, accessToken, access_token
#   2. a header shape: {"headers": {"Authorization": "Bearer x"}} or a
#                      top-level Authorization / authorization key
#   3. anything:       the first non-empty string value in the bag
#
# Each strategy is a plain function returning "" when it finds nothing, so
# the chain is just "first non-empty result".
# =============================================================================

from typing import Any, Callable, Mapping, Optional

TOKEN_ALIASES = ("bearerToken", "token", "bearer_token", "accessToken", "access_token")
AUTH_HEADER_KEYS = ("Authorization", "authorization")


def _strip_bearer(value: str) -> str:
    value = value.strip()
    if value[:7].lower() == "bearer ":
        value = value[7:].strip()
    return value


def _string(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def from_aliases(arguments: Mapping[str, Any]) -> str:
    for key in TOKEN_ALIASES:
        token = _string(arguments.get(key))
        if token:
            return token
    return ""


def from_headers(arguments: Mapping[str, Any]) -> str:
    headers = arguments.get("headers")
    candidates = [headers] if isinstance(headers, Mapping) else []
    candidates.append(arguments)
    for source in candidates:
        for key in AUTH_HEADER_KEYS:
            token = _strip_bearer(_string(source.get(key)))
            if token:
                return token
    return ""


def from_any_string(arguments: Mapping[str, Any]) -> str:
    for value in arguments.values():
        token = _string(value)
        if token:
            return _strip_bearer(token)
    return ""


STRATEGIES: tuple[Callable[[Mapping[str, Any]], str], ...] = (
    from_aliases,
    from_headers,
    from_any_string,
)


def extract_token(arguments: Optional[Mapping[str, Any]]) -> str:
    """First token any strategy finds, or "" (never raises)."""
    if not isinstance(arguments, Mapping):
        return ""
    for strategy in STRATEGIES:
        token = strategy(arguments)
        if token:
            return token
    return ""
