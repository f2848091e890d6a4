"""API base URL resolution."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from botwire.errors import ConfigurationError

DEFAULT_API_URL = "https://api.telegram.org"

_DEFAULT_URL = httpx.URL(DEFAULT_API_URL)


@dataclass(frozen=True, slots=True)
class ApiUrl:
    """Either the platform default or a caller-supplied base URL.

    ``httpx.URL`` is immutable, so copies of a custom ``ApiUrl`` share the
    same URL object and resolving never re-parses it.
    """

    custom: httpx.URL | None = None

    @classmethod
    def default(cls) -> ApiUrl:
        return cls()

    @classmethod
    def from_url(cls, url: str | httpx.URL) -> ApiUrl:
        """Create a custom ``ApiUrl``; the URL is trusted verbatim once it parses."""
        try:
            parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ConfigurationError(f"Invalid API URL: {exc}") from exc
        if not parsed.is_absolute_url:
            raise ConfigurationError(
                f"API URL must be absolute, got {str(parsed)!r}",
                hint="Pass something like 'https://localhost:8081'.",
            )
        return cls(custom=parsed)

    @property
    def is_default(self) -> bool:
        return self.custom is None

    def get(self) -> httpx.URL:
        """Return the base URL in use."""
        return _DEFAULT_URL if self.custom is None else self.custom

    def method_url(self, token: str, method_name: str) -> httpx.URL:
        """Return ``{base}/bot{token}/{method_name}``, keeping any base path."""
        base = self.get()
        path = base.path.rstrip("/")
        return base.copy_with(path=f"{path}/bot{token}/{method_name}")


def redact_url(url: httpx.URL) -> str:
    """Render a method URL for logs with the token segment masked."""
    segments = url.path.split("/")
    if len(segments) >= 2 and segments[-2].startswith("bot"):
        segments[-2] = "bot***"
    return str(url.copy_with(path="/".join(segments)))
