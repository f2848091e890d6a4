"""Shared HTTP transport construction.

All bots built by botwire share the settings below. Timeouts are fixed at
construction because the client cannot know ahead of time which calls are
long-running.
"""

from __future__ import annotations

from typing import Any

import httpx

from botwire.errors import ConfigurationError

CONNECT_TIMEOUT_S = 5.0
#: Budget for the slowest regular method, on top of connecting.
METHOD_TIMEOUT_S = 10.0
TIMEOUT_MARGIN_S = 2.0

DEFAULT_HEADERS: dict[str, str] = {"Connection": "keep-alive"}
DEFAULT_LIMITS = httpx.Limits(
    max_connections=None,
    max_keepalive_connections=100,
    keepalive_expiry=90.0,
)


def sound_timeout() -> httpx.Timeout:
    """Return the default timeout: connect + method budget + margin."""
    total = CONNECT_TIMEOUT_S + METHOD_TIMEOUT_S + TIMEOUT_MARGIN_S
    return httpx.Timeout(total, connect=CONNECT_TIMEOUT_S)


def sound_client_kwargs(*, proxy: str | None = None) -> dict[str, Any]:
    """Keyword arguments for an ``httpx.AsyncClient`` that survives long uptimes."""
    kwargs: dict[str, Any] = {
        "timeout": sound_timeout(),
        "headers": dict(DEFAULT_HEADERS),
        "limits": DEFAULT_LIMITS,
    }
    if proxy:
        kwargs["proxy"] = proxy
    return kwargs


def build_sound_client(*, proxy: str | None = None) -> httpx.AsyncClient:
    """Build the default ``httpx.AsyncClient``.

    Raises:
        ConfigurationError: If the client cannot be constructed (e.g. a
            malformed proxy URL).
    """
    try:
        return httpx.AsyncClient(**sound_client_kwargs(proxy=proxy))
    except (ValueError, TypeError, httpx.InvalidURL) as exc:
        raise ConfigurationError(
            f"Cannot create HTTP client: {exc}",
            hint="Check the proxy URL (BOTWIRE_PROXY) or pass a ready client.",
        ) from exc
