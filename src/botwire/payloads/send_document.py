from __future__ import annotations

from botwire.payloads.base import MultipartPayload
from botwire.types import ChatId, InputFile, Message, ParseMode


class SendDocument(MultipartPayload):
    """Send a general file. Returns the sent ``Message``."""

    NAME = "sendDocument"
    Output = Message

    chat_id: ChatId
    document: InputFile
    thumb: InputFile | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    disable_content_type_detection: bool | None = None
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None
    allow_sending_without_reply: bool | None = None
