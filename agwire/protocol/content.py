"""Role-aware content resolution.

The legal shape of a message's ``content`` is fully determined by its role.
:data:`CONTENT_RULES` is the single table of those shapes;
:func:`resolve_content` applies it.  Nothing is coerced: a JSON object is
never accepted where a string is expected, and vice versa.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from agwire.protocol.errors import DecodeError, InvalidContentShape, UnknownContentType
from agwire.protocol.models.enums import Role
from agwire.protocol.models.input import INPUT_CONTENT_ADAPTER, BinaryInputContent, InputContent, TextInputContent
from agwire.protocol.validation import translate

ContentValue = str | list[InputContent] | dict[str, Any] | None


@dataclass(frozen=True)
class ContentRule:
    """Content shapes accepted for one role."""

    text: bool = False
    parts: bool = False
    structured: bool = False
    optional: bool = False

    def describe(self) -> str:
        shapes = []
        if self.text:
            shapes.append("a string")
        if self.parts:
            shapes.append("a list of input content parts")
        if self.structured:
            shapes.append("a JSON object")
        expected = " or ".join(shapes)
        return f"{expected} (or absent)" if self.optional else expected


CONTENT_RULES: Mapping[Role, ContentRule] = MappingProxyType(
    {
        Role.USER: ContentRule(text=True, parts=True),
        Role.ASSISTANT: ContentRule(text=True, optional=True),
        Role.TOOL: ContentRule(text=True),
        Role.ACTIVITY: ContentRule(structured=True),
        Role.REASONING: ContentRule(text=True),
    }
)


def resolve_content(role: Role, raw: Any) -> ContentValue:
    """Decode *raw* into the content shape *role* allows.

    Raises ``InvalidContentShape`` when the value has a shape the role does
    not accept, or when a list element is not a valid input content part.
    """
    rule = CONTENT_RULES[role]
    if raw is None:
        if rule.optional:
            return None
        return _reject(role, rule, "null")
    if isinstance(raw, str):
        return raw if rule.text else _reject(role, rule, "a string")
    if isinstance(raw, list | tuple):
        return _resolve_parts(role, raw) if rule.parts else _reject(role, rule, "a list")
    if isinstance(raw, Mapping):
        return dict(raw) if rule.structured else _reject(role, rule, "a JSON object")
    return _reject(role, rule, type(raw).__name__)


def _reject(role: Role, rule: ContentRule, got: str) -> ContentValue:
    raise InvalidContentShape(role, f"expected {rule.describe()}, got {got}")


def _resolve_parts(role: Role, raw: list | tuple) -> list[InputContent]:
    parts: list[InputContent] = []
    for index, item in enumerate(raw):
        try:
            parts.append(decode_part(item))
        except DecodeError as exc:
            raise InvalidContentShape(role, f"content[{index}]: {exc.reason}") from exc
    return parts


def decode_part(item: Any) -> InputContent:
    """Decode one input content part, raising the part's own ``DecodeError``."""
    if isinstance(item, TextInputContent | BinaryInputContent):
        return item
    try:
        return INPUT_CONTENT_ADAPTER.validate_python(item)
    except ValidationError as exc:
        raise translate(exc, item, unknown_tag=UnknownContentType) from None
