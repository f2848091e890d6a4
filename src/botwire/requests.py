"""Request: a payload bound to the bot that will send it."""

from __future__ import annotations

from collections.abc import Coroutine, Generator
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from botwire.payloads.base import Payload

if TYPE_CHECKING:
    from botwire.bot import Bot

P = TypeVar("P", bound=Payload)


class Request(Generic[P]):
    """A configurable, awaitable call.

    Optional fields can be set before sending; nothing touches the network
    until the request is awaited or ``send()`` is called::

        msg = await bot.send_message(chat_id, "hi").set(disable_notification=True)
    """

    __slots__ = ("bot", "payload")

    def __init__(self, bot: Bot, payload: P) -> None:
        self.bot = bot
        self.payload = payload

    def set(self, **fields: Any) -> Self:
        """Set payload fields in place and return the request for chaining."""
        self.payload.set(**fields)
        return self

    def send(self) -> Coroutine[Any, Any, Any]:
        """Encode the payload now and return the coroutine performing the call."""
        return self.bot.execute(self.payload)

    def __await__(self) -> Generator[Any, None, Any]:
        return self.send().__await__()

    def __repr__(self) -> str:
        return f"Request({self.payload!r})"
