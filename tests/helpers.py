"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: one scripted fake server instead of
per-test transports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import re
from typing import Any

import httpx

TOKEN = "123456:TEST-token_value"


@dataclass
class FakeBotApi:
    """Scripted stand-in for the Bot API server.

    Each entry of ``script`` answers one request: a dict is sent as a JSON
    body, bytes as a raw body, an ``httpx.Response`` as-is, and an exception
    is raised from the transport. Every request is recorded.
    """

    script: list[Any] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def reply(self, body: dict[str, Any] | bytes | httpx.Response) -> FakeBotApi:
        self.script.append(body)
        return self

    def fail(self, exc: BaseException) -> FakeBotApi:
        self.script.append(exc)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.script.pop(0) if self.script else {"ok": True, "result": True}
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, httpx.Response):
            return item
        if isinstance(item, bytes):
            return httpx.Response(200, content=item)
        status = 200 if item.get("ok") else int(item.get("error_code") or 400)
        return httpx.Response(status, json=item)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.last.content)


_PART_NAME_RE = re.compile(rb'Content-Disposition: form-data; name="([^"]+)"')


def multipart_names(request: httpx.Request) -> list[str]:
    """Return form part names of a multipart request, in wire order."""
    return [m.decode() for m in _PART_NAME_RE.findall(request.content)]


def user_json(**overrides: Any) -> dict[str, Any]:
    data = {"id": 42, "is_bot": True, "first_name": "Wire", "username": "wire_bot"}
    data.update(overrides)
    return data


def message_json(message_id: int = 1, **overrides: Any) -> dict[str, Any]:
    data = {
        "message_id": message_id,
        "date": 1_700_000_000,
        "chat": {"id": 100, "type": "private", "first_name": "Ann"},
        "from": user_json(),
    }
    data.update(overrides)
    return data
