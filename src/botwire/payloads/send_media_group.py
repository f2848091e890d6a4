from __future__ import annotations

from pydantic import Field

from botwire.payloads.base import MultipartPayload
from botwire.types import ChatId, InputMedia, Message


class SendMediaGroup(MultipartPayload):
    """Send a group of photos, videos, documents or audios as an album.

    Documents and audio files can only be grouped with messages of the same
    type. Returns the list of sent messages.
    """

    NAME = "sendMediaGroup"
    Output = list[Message]

    chat_id: ChatId
    #: 2-10 items.
    media: list[InputMedia] = Field(min_length=2, max_length=10)
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None
    allow_sending_without_reply: bool | None = None
