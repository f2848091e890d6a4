from __future__ import annotations

from botwire.payloads.base import JsonPayload
from botwire.types import User


class GetMe(JsonPayload):
    """Return basic information about the bot as a ``User``."""

    NAME = "getMe"
    Output = User
