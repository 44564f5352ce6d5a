"""Shared base and field types for wire models.

Inbound payloads may use camelCase or snake_case for any field (see
:mod:`agwire.protocol.aliases`); outbound serialization is camelCase only.
Decoded values are immutable.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, AliasGenerator, BaseModel, ConfigDict, ValidationInfo

from agwire.protocol.aliases import validation_alias, wire_name
from agwire.protocol.errors import EmptyRequiredField, InvalidEnumValue

E = TypeVar("E", bound=StrEnum)


class WireModel(BaseModel):
    """Base class for every decodable protocol structure."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(
            validation_alias=validation_alias,
            serialization_alias=wire_name,
        ),
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Return the camelCase JSON-compatible representation."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> bytes:
        """Serialize to camelCase JSON bytes.  Does not re-validate."""
        return self.model_dump_json(by_alias=True).encode()


# -- Field types -------------------------------------------------------------


def _require_non_empty(value: str, info: ValidationInfo) -> str:
    if not value:
        raise EmptyRequiredField(wire_name(info.field_name or "value"))
    return value


NonEmptyStr = Annotated[str, AfterValidator(_require_non_empty)]
"""A required string field that must also be non-empty."""


def enum_value(enum_cls: type[E], field: str, value: Any) -> E:
    """Coerce *value* to *enum_cls* or raise ``InvalidEnumValue``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidEnumValue(field, value, [member.value for member in enum_cls]) from None
