"""Platform types used by the shipped payloads.

Response types ignore unknown keys so that new platform fields never break
decoding. Request-side types (``InputFile``, ``InputMedia*``) serialize to the
exact wire shape.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import mimetypes
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError, core_schema

from botwire.errors import InputFileError

ChatId = int | str
"""Unique chat identifier or ``@channelusername``."""

ParseMode = Literal["HTML", "Markdown", "MarkdownV2"]

InputFileKind = Literal["path", "memory", "url", "file_id"]


class ApiObject(BaseModel):
    """Base for objects returned by the platform."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResponseParameters(ApiObject):
    """Hints attached to some failed responses."""

    retry_after: int | None = None
    migrate_to_chat_id: int | None = None


class User(ApiObject):
    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
    can_join_groups: bool | None = None
    can_read_all_group_messages: bool | None = None
    supports_inline_queries: bool | None = None


class Chat(ApiObject):
    id: int
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class PhotoSize(ApiObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: int | None = None


class Document(ApiObject):
    file_id: str
    file_unique_id: str
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class UserProfilePhotos(ApiObject):
    """A user's profile pictures, each as a list of sizes."""

    total_count: int
    photos: list[list[PhotoSize]]


class Message(ApiObject):
    message_id: int
    date: int
    chat: Chat
    from_: User | None = Field(default=None, alias="from")
    text: str | None = None
    caption: str | None = None
    media_group_id: str | None = None
    document: Document | None = None
    photo: list[PhotoSize] | None = None
    reply_to_message: Message | None = None


# =============================================================================
# Input files
# =============================================================================


@dataclass(frozen=True, slots=True)
class InputFile:
    """A file to send.

    ``url`` and ``file_id`` inputs are passed to the platform as plain strings.
    ``path`` and ``memory`` inputs are uploaded as multipart parts; their
    contents are only read when the request is built.
    """

    kind: InputFileKind
    value: str | bytes | Path
    filename: str | None = None

    @classmethod
    def from_path(cls, path: str | Path, *, filename: str | None = None) -> InputFile:
        p = Path(path)
        return cls(kind="path", value=p, filename=filename or p.name)

    @classmethod
    def from_bytes(cls, data: bytes, *, filename: str = "file") -> InputFile:
        return cls(kind="memory", value=bytes(data), filename=filename)

    @classmethod
    def from_url(cls, url: str) -> InputFile:
        return cls(kind="url", value=url)

    @classmethod
    def from_file_id(cls, file_id: str) -> InputFile:
        return cls(kind="file_id", value=file_id)

    @property
    def needs_upload(self) -> bool:
        return self.kind in ("path", "memory")

    @property
    def content_type(self) -> str:
        guessed = mimetypes.guess_type(self.filename or "")[0]
        return guessed or "application/octet-stream"

    async def read(self) -> bytes:
        """Return the file contents without blocking the event loop.

        Raises:
            InputFileError: If the file cannot be read.
        """
        if isinstance(self.value, bytes):
            return self.value
        if isinstance(self.value, Path):
            path = self.value
            try:
                return await asyncio.to_thread(path.read_bytes)
            except OSError as exc:
                raise InputFileError(
                    f"Cannot read input file {path}: {exc.strerror or exc}",
                    hint="Check that the file exists and is readable.",
                ) from exc
        raise InputFileError(f"InputFile of kind {self.kind!r} has no local content")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: Any
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> InputFile:
        if isinstance(value, InputFile):
            return value
        raise ValueError(f"expected InputFile, got {type(value).__name__}")

    @staticmethod
    def _serialize(value: InputFile, info: Any) -> str:
        if not value.needs_upload:
            return str(value.value)
        # Uploads nested in structured fields are sent as separate parts and
        # referenced by name; the multipart encoder supplies the collector.
        context = info.context or {}
        attachments = context.get("attachments")
        if attachments is None:
            raise PydanticSerializationError(
                "InputFile uploads can only be sent in multipart requests"
            )
        name = f"file{len(attachments)}"
        attachments.append((name, value))
        return f"attach://{name}"


# =============================================================================
# Input media
# =============================================================================


class InputMediaBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    media: InputFile
    caption: str | None = None
    parse_mode: ParseMode | None = None


class InputMediaPhoto(InputMediaBase):
    type: Literal["photo"] = "photo"


class InputMediaVideo(InputMediaBase):
    type: Literal["video"] = "video"
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    supports_streaming: bool | None = None


class InputMediaAudio(InputMediaBase):
    type: Literal["audio"] = "audio"
    duration: int | None = None
    performer: str | None = None
    title: str | None = None


class InputMediaDocument(InputMediaBase):
    type: Literal["document"] = "document"
    disable_content_type_detection: bool | None = None


InputMedia = Annotated[
    InputMediaPhoto | InputMediaVideo | InputMediaAudio | InputMediaDocument,
    Field(discriminator="type"),
]
