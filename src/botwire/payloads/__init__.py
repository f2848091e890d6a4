"""Payload definitions, one class per remote method."""

from botwire.payloads.base import JsonPayload, MultipartPayload, Payload
from botwire.payloads.get_me import GetMe
from botwire.payloads.get_user_profile_photos import GetUserProfilePhotos
from botwire.payloads.send_document import SendDocument
from botwire.payloads.send_media_group import SendMediaGroup
from botwire.payloads.send_message import SendMessage

__all__ = [
    "GetMe",
    "GetUserProfilePhotos",
    "JsonPayload",
    "MultipartPayload",
    "Payload",
    "SendDocument",
    "SendMediaGroup",
    "SendMessage",
]
