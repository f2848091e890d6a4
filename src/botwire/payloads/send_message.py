from __future__ import annotations

from botwire.payloads.base import JsonPayload
from botwire.types import ChatId, Message, ParseMode


class SendMessage(JsonPayload):
    """Send a text message. Returns the sent ``Message``."""

    NAME = "sendMessage"
    Output = Message

    chat_id: ChatId
    text: str
    parse_mode: ParseMode | None = None
    disable_web_page_preview: bool | None = None
    #: Users receive the message with no sound.
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None
    #: Send even if the replied-to message is not found.
    allow_sending_without_reply: bool | None = None
