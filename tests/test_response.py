"""Response envelope decoding: success, API errors, malformed envelopes."""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter
import pytest

from botwire.errors import (
    ApiError,
    InvalidJsonError,
    MigrateToChatIdError,
    RateLimitError,
    ResultDecodeError,
)
from botwire.response import ApiResponse, decode_response, parse_envelope
from botwire.types import Message, User
from tests.helpers import message_json, user_json

pytestmark = pytest.mark.contract

_USER = TypeAdapter(User)


def _raw(body: dict[str, Any]) -> bytes:
    return json.dumps(body).encode()


def test_ok_envelope_decodes_result() -> None:
    user = decode_response(
        _raw({"ok": True, "result": user_json()}), method="getMe", adapter=_USER
    )

    assert user == User(id=42, is_bot=True, first_name="Wire", username="wire_bot")


def test_ok_envelope_decodes_list_results() -> None:
    raw = _raw({"ok": True, "result": [message_json(1), message_json(2)]})

    messages = decode_response(
        raw, method="sendMediaGroup", adapter=TypeAdapter(list[Message])
    )

    assert [m.message_id for m in messages] == [1, 2]
    assert messages[0].from_ is not None


def test_unknown_result_keys_are_ignored() -> None:
    raw = _raw({"ok": True, "result": user_json(added_in_next_version=True)})
    assert decode_response(raw, method="getMe", adapter=_USER).id == 42


def test_rate_limit_envelope_carries_retry_after() -> None:
    raw = _raw(
        {
            "ok": False,
            "error_code": 429,
            "description": "Too Many Requests",
            "parameters": {"retry_after": 5},
        }
    )

    with pytest.raises(RateLimitError) as exc:
        decode_response(raw, method="sendMessage", adapter=_USER)

    assert exc.value.error_code == 429
    assert exc.value.retry_after == 5
    assert exc.value.description == "Too Many Requests"
    assert exc.value.method == "sendMessage"
    assert exc.value.hint is not None


def test_plain_api_error() -> None:
    raw = _raw({"ok": False, "error_code": 400, "description": "Bad Request: chat not found"})

    with pytest.raises(ApiError) as exc:
        decode_response(raw, method="sendMessage", adapter=_USER)

    assert type(exc.value) is ApiError
    assert exc.value.retry_after is None
    assert "chat not found" in str(exc.value)


def test_api_error_carries_envelope_fields_verbatim() -> None:
    raw = _raw({"ok": False, "error_code": 0, "description": ""})

    with pytest.raises(ApiError) as exc:
        decode_response(raw, method="getMe", adapter=_USER)

    assert exc.value.error_code == 0
    assert exc.value.description == ""


def test_migrate_to_chat_id() -> None:
    raw = _raw(
        {
            "ok": False,
            "error_code": 400,
            "description": "Bad Request: group chat was upgraded to a supergroup chat",
            "parameters": {"migrate_to_chat_id": -1001234},
        }
    )

    with pytest.raises(MigrateToChatIdError) as exc:
        decode_response(raw, method="sendMessage", adapter=_USER)

    assert exc.value.migrate_to_chat_id == -1001234


@pytest.mark.parametrize(
    "body",
    [
        {"result": True},
        {"ok": "true", "result": True},
        {"ok": True},
        {"ok": True, "result": True, "error_code": 400},
        {"ok": False, "description": "no code"},
        {"ok": False, "error_code": 400},
        {"ok": False, "error_code": 400, "description": "x", "result": True},
    ],
    ids=[
        "missing-ok",
        "non-bool-ok",
        "ok-without-result",
        "ok-with-error-code",
        "error-without-code",
        "error-without-description",
        "error-with-result",
    ],
)
def test_envelope_invariants_are_enforced(body: dict[str, Any]) -> None:
    with pytest.raises(InvalidJsonError) as exc:
        decode_response(_raw(body), method="getMe", adapter=_USER)
    assert exc.value.raw == json.dumps(body)


@pytest.mark.parametrize("raw", [b"", b"<html>502 Bad Gateway</html>", b"[1, 2]", b"null"])
def test_non_envelope_bodies_are_invalid_json(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError):
        parse_envelope(raw, method="getMe")


def test_result_shape_mismatch_is_decode_error_not_api_error() -> None:
    raw = _raw({"ok": True, "result": {"id": "not-an-int"}})

    with pytest.raises(ResultDecodeError) as exc:
        decode_response(raw, method="getMe", adapter=_USER)

    assert not isinstance(exc.value, ApiError)
    assert exc.value.method == "getMe"
    assert "not-an-int" in exc.value.raw


def test_envelope_model_accepts_null_result_when_present() -> None:
    envelope = ApiResponse.model_validate({"ok": True, "result": None})
    assert envelope.ok is True
    assert envelope.result is None
