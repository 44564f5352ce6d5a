"""Translation of pydantic validation failures into decode errors.

Models raise :class:`~agwire.protocol.errors.DecodeError` subclasses from
their validators; pydantic wraps those in a ``ValidationError``.
:func:`translate` recovers the original error (or maps pydantic's own error
types onto the taxonomy) and attaches location context: the dotted path,
and the role and id of the enclosing message when there is one.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from agwire.protocol.aliases import wire_name
from agwire.protocol.errors import (
    DecodeError,
    InvalidEnumValue,
    InvalidFieldType,
    MalformedPayload,
    MissingRequiredField,
    UnknownRole,
)
from agwire.protocol.models.enums import EventType, InputContentType, Role

# Discriminator tag values pydantic inserts into error locations.
_ROLE_TAGS = frozenset(Role)
_TAG_VALUES = _ROLE_TAGS | frozenset(InputContentType) | frozenset(EventType)

_QUOTED = re.compile(r"'([^']*)'")


# ---------------------------------------------------------------------------
# ValidationError -> DecodeError
# ---------------------------------------------------------------------------


def translate(
    exc: ValidationError,
    raw: Any = None,
    *,
    unknown_tag: Callable[[Any], DecodeError] | None = None,
) -> DecodeError:
    """Map the first error in *exc* onto the decode error taxonomy.

    *raw* is the payload that was validated; it is only read to look up the
    id of the message a failure occurred in.  *unknown_tag* builds the error
    for an unrecognised discriminator tag other than a message role.
    """
    details = exc.errors(include_url=False)
    if not details:  # pragma: no cover - pydantic never raises an empty error
        return MalformedPayload(str(exc))
    detail = details[0]
    path, field, role, message = _locate(detail["loc"], raw)
    message_id = message.get("id") if message is not None else None
    if not isinstance(message_id, str):
        message_id = None

    error = _to_decode_error(detail, field, unknown_tag)
    return error.with_context(role=role, message_id=message_id, path=path or None)


def _to_decode_error(
    detail: Mapping[str, Any],
    field: str | None,
    unknown_tag: Callable[[Any], DecodeError] | None,
) -> DecodeError:
    kind = detail["type"]
    ctx = detail.get("ctx") or {}

    if kind == "value_error" and isinstance(ctx.get("error"), DecodeError):
        return ctx["error"]

    if kind == "missing":
        return MissingRequiredField(field or "value")

    if kind in ("union_tag_not_found", "union_tag_invalid"):
        discriminator = _unquote(ctx.get("discriminator", "")) or "type"
        if kind == "union_tag_not_found":
            return MissingRequiredField(discriminator)
        tag = ctx.get("tag")
        expected = _QUOTED.findall(ctx.get("expected_tags", ""))
        if discriminator == "role":
            return UnknownRole(tag)
        if unknown_tag is not None:
            return unknown_tag(tag)
        return InvalidEnumValue(discriminator, tag, expected)

    if kind in ("enum", "literal_error"):
        return InvalidEnumValue(field or "value", detail.get("input"), _QUOTED.findall(ctx.get("expected", "")))

    if field is None:
        return MalformedPayload(f"expected a JSON object: {detail['msg']}")
    return InvalidFieldType(field, detail["msg"])


def _unquote(value: str) -> str:
    found = _QUOTED.findall(value)
    return found[0] if found else value


def _locate(loc: tuple[Any, ...], raw: Any) -> tuple[str, str | None, str | None, Mapping[str, Any] | None]:
    """Walk an error location.

    Returns the dotted path (union tags removed), the last field name, the
    role tag of the innermost message, and that message's raw mapping.
    """
    path = ""
    field = None
    role = None
    message = None
    node = raw
    after_index = True
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
            node = node[item] if isinstance(node, list) and 0 <= item < len(node) else None
            after_index = True
            continue
        item = str(item)
        if after_index and item in _TAG_VALUES:
            if item in _ROLE_TAGS and isinstance(node, Mapping):
                role = item
                message = node
            after_index = False
            continue
        after_index = False
        field = wire_name(item)
        path = f"{path}.{field}" if path else field
        node = node.get(item) if isinstance(node, Mapping) else None
    if message is None and loc and isinstance(loc[-1], int) and isinstance(node, Mapping):
        # The failing value is a list element itself, e.g. a message with a bad role.
        message = node
    return path, field, role, message
