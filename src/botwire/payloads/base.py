"""Payload contract: what every remote operation declares.

A payload is a pydantic model whose fields are the method's parameters.
Required fields are declared first and always sent; optional fields default
to ``None`` and are omitted from the wire when unset. Each concrete payload
class fixes, at definition time:

- ``NAME``: the wire method name,
- ``Output``: the type ``result`` is decoded into,
- its encoding, by subclassing exactly one of ``JsonPayload`` or
  ``MultipartPayload``.
"""

from __future__ import annotations

from functools import cache
from typing import Any, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, TypeAdapter

Encoding = Literal["json", "multipart"]


class Payload(BaseModel):
    """Base for all payloads. Use ``JsonPayload`` or ``MultipartPayload``."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        populate_by_name=True,
    )

    NAME: ClassVar[str]
    Output: ClassVar[Any]
    ENCODING: ClassVar[Encoding]

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        first_optional: str | None = None
        for name, info in cls.model_fields.items():
            if not info.is_required():
                first_optional = first_optional or name
            elif first_optional is not None:
                raise TypeError(
                    f"{cls.__name__}: required field {name!r} declared after "
                    f"optional field {first_optional!r}"
                )

    def set(self, **fields: Any) -> Self:
        """Assign fields in place (validated) and return the payload for chaining."""
        for name, value in fields.items():
            setattr(self, name, value)
        return self

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        return tuple(n for n, f in cls.model_fields.items() if f.is_required())

    @classmethod
    def optional_fields(cls) -> tuple[str, ...]:
        return tuple(n for n, f in cls.model_fields.items() if not f.is_required())

    @classmethod
    def output_adapter(cls) -> TypeAdapter[Any]:
        """Return the (cached) validator for this payload's ``Output``."""
        return _output_adapter(cls.Output)

    def __repr_args__(self) -> Any:
        # Unset optionals are noise in reprs of large payloads.
        return [(k, v) for k, v in super().__repr_args__() if v is not None]


class JsonPayload(Payload):
    """A payload sent as a single JSON object."""

    ENCODING: ClassVar[Encoding] = "json"


class MultipartPayload(Payload):
    """A payload that may carry file uploads, sent as ``multipart/form-data``."""

    ENCODING: ClassVar[Encoding] = "multipart"


@cache
def _output_adapter(output: Any) -> TypeAdapter[Any]:
    return TypeAdapter(output)
