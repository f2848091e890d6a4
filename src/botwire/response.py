"""Response envelope decoding.

Every platform response is wrapped as::

    {"ok": true, "result": ...}
    {"ok": false, "error_code": 429, "description": "...",
     "parameters": {"retry_after": 5}}

``decode_response`` turns a raw body into the decoded ``result`` or raises
one of ``InvalidJsonError``, ``ApiError`` (and subclasses), or
``ResultDecodeError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError, model_validator

from botwire.errors import (
    ApiError,
    InvalidJsonError,
    MigrateToChatIdError,
    RateLimitError,
    ResultDecodeError,
)
from botwire.types import ResponseParameters

if TYPE_CHECKING:
    from pydantic import TypeAdapter


class ApiResponse(BaseModel):
    """The platform's response envelope.

    ``ok`` is true exactly when ``result`` is present and neither
    ``error_code`` nor ``description`` is; failed envelopes must carry both.
    """

    model_config = ConfigDict(extra="ignore")

    ok: StrictBool
    result: Any = None
    error_code: int | None = None
    description: str | None = None
    parameters: ResponseParameters | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> ApiResponse:
        has_result = "result" in self.model_fields_set
        if self.ok:
            if not has_result:
                raise ValueError("successful envelope has no 'result'")
            if self.error_code is not None or self.description is not None:
                raise ValueError(
                    "successful envelope carries 'error_code' or 'description'"
                )
        else:
            if has_result:
                raise ValueError("failed envelope carries 'result'")
            if self.error_code is None or self.description is None:
                raise ValueError(
                    "failed envelope lacks 'error_code' or 'description'"
                )
        return self


def parse_envelope(raw: bytes, *, method: str) -> ApiResponse:
    """Parse *raw* as an envelope, or raise ``InvalidJsonError``."""
    try:
        return ApiResponse.model_validate_json(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ())) or "body"
        raise InvalidJsonError(
            f"{method}: invalid response envelope ({where}: {first['msg']})",
            method=method,
            raw=_snippet(raw),
        ) from exc


def api_error(envelope: ApiResponse, *, method: str) -> ApiError:
    """Build the ``ApiError`` for a failed envelope.

    *envelope* has passed validation, so ``error_code`` and ``description``
    are both present.
    """
    code = envelope.error_code
    description = envelope.description
    assert code is not None and description is not None
    params = envelope.parameters or ResponseParameters()

    err_cls: type[ApiError] = ApiError
    hint: str | None = None
    if params.retry_after is not None:
        err_cls = RateLimitError
        hint = f"Flood control: retry after {params.retry_after}s."
    elif params.migrate_to_chat_id is not None:
        err_cls = MigrateToChatIdError
        hint = f"The chat moved to {params.migrate_to_chat_id}; use the new chat id."

    return err_cls(
        f"{method} failed (error_code={code}): {description}",
        hint=hint,
        method=method,
        error_code=code,
        description=description,
        retry_after=params.retry_after,
        migrate_to_chat_id=params.migrate_to_chat_id,
    )


def decode_response(raw: bytes, *, method: str, adapter: TypeAdapter[Any]) -> Any:
    """Decode a raw response body into the method's output type.

    Raises:
        InvalidJsonError: The body is not a well-formed envelope.
        ApiError: The platform answered ``"ok": false``.
        ResultDecodeError: ``result`` does not fit the output type.
    """
    envelope = parse_envelope(raw, method=method)
    if not envelope.ok:
        raise api_error(envelope, method=method)

    try:
        return adapter.validate_python(envelope.result)
    except ValidationError as exc:
        raise ResultDecodeError(
            f"{method}: result does not match the declared output type: {exc}",
            hint="The platform and this client disagree on the result's shape.",
            method=method,
            raw=_snippet(raw),
        ) from exc


def _snippet(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")
