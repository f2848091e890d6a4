"""Per-method shortcuts that build ``Request`` objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from botwire.payloads import (
    GetMe,
    GetUserProfilePhotos,
    SendDocument,
    SendMediaGroup,
    SendMessage,
)
from botwire.requests import Request

if TYPE_CHECKING:
    from collections.abc import Iterable

    from botwire.bot import Bot
    from botwire.types import ChatId, InputFile, InputMedia


class Requester:
    """Mixin providing one method per shipped payload.

    Required fields are positional; optional fields are keywords and can also
    be set later with ``Request.set``.
    """

    __slots__ = ()

    def get_me(self: Bot) -> Request[GetMe]:
        return Request(self, GetMe())

    def get_user_profile_photos(
        self: Bot, user_id: int, **optional: Any
    ) -> Request[GetUserProfilePhotos]:
        return Request(self, GetUserProfilePhotos(user_id=user_id, **optional))

    def send_message(
        self: Bot, chat_id: ChatId, text: str, **optional: Any
    ) -> Request[SendMessage]:
        return Request(self, SendMessage(chat_id=chat_id, text=text, **optional))

    def send_document(
        self: Bot, chat_id: ChatId, document: InputFile, **optional: Any
    ) -> Request[SendDocument]:
        return Request(
            self, SendDocument(chat_id=chat_id, document=document, **optional)
        )

    def send_media_group(
        self: Bot, chat_id: ChatId, media: Iterable[InputMedia], **optional: Any
    ) -> Request[SendMediaGroup]:
        return Request(
            self, SendMediaGroup(chat_id=chat_id, media=list(media), **optional)
        )
