"""Wire encoders: payload -> JSON body or multipart form.

JSON encoding is synchronous and only fails on a broken payload definition.
Multipart encoding is a coroutine because file parts are read from disk, and
an unreadable file surfaces as ``InputFileError``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import json
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic_core import PydanticSerializationError

from botwire.errors import PayloadSerializationError
from botwire.types import InputFile

if TYPE_CHECKING:
    from botwire.payloads.base import Payload


@dataclass(frozen=True, slots=True)
class JsonBody:
    """An encoded ``application/json`` request body."""

    content: bytes

    content_type: ClassVar[str] = "application/json"


@dataclass(frozen=True, slots=True)
class FormPart:
    """One ``multipart/form-data`` part. File parts carry a filename."""

    name: str
    value: bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


@dataclass(frozen=True, slots=True)
class MultipartForm:
    """An ordered multipart form.

    Field parts come in declaration order (required first, then the optional
    fields that are set), followed by files referenced through ``attach://``.
    """

    parts: tuple[FormPart, ...]

    def names(self) -> list[str]:
        return [part.name for part in self.parts]

    def to_httpx_files(self) -> list[tuple[str, tuple[str | None, bytes, str | None]]]:
        """Render as an ``httpx`` ``files=`` list.

        Everything goes through ``files`` so httpx keeps our ordering; parts
        without a filename are emitted as plain form fields.
        """
        return [
            (part.name, (part.filename, part.value, part.content_type))
            for part in self.parts
        ]


def encode_json(payload: Payload) -> JsonBody:
    """Serialize *payload* as one JSON object, omitting unset optional fields.

    Raises:
        PayloadSerializationError: If the payload cannot be represented as
            JSON (a payload definition bug, e.g. an upload in a JSON method).
    """
    try:
        text = payload.model_dump_json(by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise PayloadSerializationError(
            f"Cannot serialize {type(payload).__name__} to JSON: {exc}",
            method=payload.NAME,
        ) from exc
    return JsonBody(content=text.encode("utf-8"))


async def to_form(payload: Payload) -> MultipartForm:
    """Build the multipart form for *payload*, reading file parts off-loop.

    Raises:
        InputFileError: If a file part cannot be read.
        PayloadSerializationError: If a structured field cannot be serialized.
    """
    attachments: list[tuple[str, InputFile]] = []
    context: dict[str, Any] = {"attachments": attachments}
    parts: list[FormPart] = []

    for name, info in type(payload).model_fields.items():
        value = getattr(payload, name)
        if value is None:
            continue
        wire_name = info.alias or name

        if isinstance(value, InputFile):
            if value.needs_upload:
                parts.append(await _file_part(wire_name, value))
            else:
                parts.append(FormPart(wire_name, str(value.value).encode("utf-8")))
            continue

        try:
            dumped = payload.model_dump(
                mode="json",
                include={name},
                by_alias=True,
                exclude_none=True,
                context=context,
            )
        except PydanticSerializationError as exc:
            raise PayloadSerializationError(
                f"Cannot serialize field {wire_name!r} of {type(payload).__name__}: {exc}",
                method=payload.NAME,
            ) from exc
        parts.append(FormPart(wire_name, _text_value(dumped[wire_name])))

    parts.extend(await _read_all(attachments))
    return MultipartForm(parts=tuple(parts))


async def _read_all(attachments: list[tuple[str, InputFile]]) -> list[FormPart]:
    """Read attachments concurrently; the first failure cancels the rest."""
    tasks = [
        asyncio.ensure_future(_file_part(attach_name, f))
        for attach_name, f in attachments
    ]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        # Reap the cancelled reads so none is left pending or unobserved.
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _text_value(value: Any) -> bytes:
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (int, float)):
        return str(value).encode("utf-8")
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


async def _file_part(name: str, file: InputFile) -> FormPart:
    data = await file.read()
    return FormPart(
        name,
        data,
        filename=file.filename or name,
        content_type=file.content_type,
    )
