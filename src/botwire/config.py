"""Configuration: frozen BotConfig resolved from arguments or the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from botwire.errors import ConfigurationError

load_dotenv()

TOKEN_ENV_VAR = "BOTWIRE_TOKEN"
PROXY_ENV_VAR = "BOTWIRE_PROXY"
API_URL_ENV_VAR = "BOTWIRE_API_URL"


@dataclass(frozen=True)
class BotConfig:
    """Immutable settings used to build a ``Bot``.

    Unset fields are auto-resolved from ``BOTWIRE_TOKEN``, ``BOTWIRE_PROXY``
    and ``BOTWIRE_API_URL``. A token is mandatory.

    Example:
        config = BotConfig()  # token from BOTWIRE_TOKEN
        bot = Bot.from_config(config)
    """

    token: str | None = None
    #: Passed to ``httpx.AsyncClient(proxy=...)``.
    proxy: str | None = None
    #: Alternate API base URL, e.g. a self-hosted Bot API server.
    api_url: str | None = None

    def __post_init__(self) -> None:
        """Auto-resolve unset values and validate the token."""
        if self.token is None:
            object.__setattr__(self, "token", os.environ.get(TOKEN_ENV_VAR))
        if self.proxy is None:
            object.__setattr__(self, "proxy", os.environ.get(PROXY_ENV_VAR) or None)
        if self.api_url is None:
            object.__setattr__(
                self, "api_url", os.environ.get(API_URL_ENV_VAR) or None
            )

        if not self.token:
            raise ConfigurationError(
                "Bot token required",
                hint=f"Set {TOKEN_ENV_VAR} environment variable or pass token=...",
            )
        if any(ch.isspace() for ch in self.token):
            raise ConfigurationError(
                "Bot token must not contain whitespace",
                hint="Copy the token exactly as issued, without quotes or newlines.",
            )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"BotConfig(token={'[REDACTED]' if self.token else None}, "
            f"proxy={self.proxy!r}, api_url={self.api_url!r})"
        )

    __repr__ = __str__
