"""Exception hierarchy for botwire.

Three families:

- ``ConfigurationError``: the bot cannot be built (missing token, bad proxy,
  unusable transport). Not part of the per-call error channel.
- ``InternalError``: a payload definition and the platform disagree on shape.
  These are bugs and carry as much diagnostic detail as possible.
- ``RequestError``: recoverable, call-scoped failures returned exactly once
  per call. Nothing in botwire retries them.
"""

from __future__ import annotations

#: Raw bodies attached to errors are truncated to this many characters.
RAW_SNIPPET_LIMIT = 500


class BotwireError(Exception):
    """Base exception for all botwire errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(BotwireError):
    """Bot configuration or transport construction failed."""


class InternalError(BotwireError):
    """A botwire internal error (bug) or invariant violation."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        method: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.method = method


class PayloadSerializationError(InternalError):
    """An outbound payload could not be serialized to JSON."""


class ResultDecodeError(InternalError):
    """A successful response's ``result`` does not match the declared output type.

    This means the client and the platform disagree on a type's shape, not
    that the platform rejected the call.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        method: str | None = None,
        raw: str = "",
    ) -> None:
        super().__init__(message, hint=hint, method=method)
        self.raw = raw[:RAW_SNIPPET_LIMIT]


class RequestError(BotwireError):
    """A single call failed; the caller decides whether to retry."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        method: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.method = method


class NetworkError(RequestError):
    """Transport failure: connect, DNS, TLS, protocol or timeout."""


class NetworkTimeoutError(NetworkError):
    """The request did not complete within the transport's timeouts."""


class InvalidJsonError(RequestError):
    """The response body is not a well-formed response envelope."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        method: str | None = None,
        raw: str = "",
    ) -> None:
        super().__init__(message, hint=hint, method=method)
        self.raw = raw[:RAW_SNIPPET_LIMIT]


class InputFileError(RequestError):
    """A file part of a multipart request could not be read."""


class ApiError(RequestError):
    """The platform rejected the call (``"ok": false``)."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        method: str | None = None,
        error_code: int,
        description: str,
        retry_after: int | None = None,
        migrate_to_chat_id: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint, method=method)
        self.error_code = error_code
        self.description = description
        self.retry_after = retry_after
        self.migrate_to_chat_id = migrate_to_chat_id


class RateLimitError(ApiError):
    """Flood control: the platform asked to wait ``retry_after`` seconds."""


class MigrateToChatIdError(ApiError):
    """The group was upgraded to a supergroup with ``migrate_to_chat_id``."""


def redact_token(text: str, token: str) -> str:
    """Replace every occurrence of *token* in *text* with a fixed marker."""
    if not token:
        return text
    return text.replace(token, "[REDACTED]")

