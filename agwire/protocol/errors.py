"""Decode error taxonomy.

Every failure is a local, non-retryable data-quality signal about one
payload.  All errors subclass ``DecodeError`` (itself a ``ValueError``) so
they can be raised from inside pydantic validators and recovered from the
resulting ``ValidationError`` by :mod:`agwire.protocol.decoding`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self


class DecodeError(ValueError):
    """Base class for payload decode / validation failures.

    Attributes
    ----------
    field:
        Wire name of the offending field, when one applies.
    role:
        Role of the enclosing message, when known.
    message_id:
        ``id`` of the enclosing message, when known.
    path:
        Dotted location of the failure within the payload, e.g.
        ``messages[2].content[0].mimeType``.
    """

    def __init__(
        self,
        reason: str,
        *,
        field: str | None = None,
        role: str | None = None,
        message_id: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.field = field
        self.role = str(role) if role is not None else None
        self.message_id = message_id
        self.path = path

    def with_context(
        self,
        *,
        role: str | None = None,
        message_id: str | None = None,
        path: str | None = None,
    ) -> Self:
        """Fill in location context that is not already set and return self."""
        if self.role is None and role is not None:
            self.role = str(role)
        if self.message_id is None and message_id is not None:
            self.message_id = message_id
        if self.path is None and path is not None:
            self.path = path
        return self

    def __str__(self) -> str:
        context = []
        if self.path:
            context.append(f"at {self.path}")
        if self.message_id is not None:
            context.append(f"message_id={self.message_id!r}")
        if self.role is not None:
            context.append(f"role={self.role!r}")
        if not context:
            return self.reason
        return f"{self.reason} ({', '.join(context)})"


class MissingRequiredField(DecodeError):
    def __init__(self, field: str, **context: Any) -> None:
        super().__init__(f"missing required field '{field}'", field=field, **context)


class EmptyRequiredField(DecodeError):
    def __init__(self, field: str, **context: Any) -> None:
        super().__init__(f"field '{field}' must not be empty", field=field, **context)


class UnknownRole(DecodeError):
    def __init__(self, value: object, **context: Any) -> None:
        super().__init__(f"unknown message role {value!r}", field="role", **context)
        self.value = value


class UnknownContentType(DecodeError):
    def __init__(self, value: object, **context: Any) -> None:
        super().__init__(f"unknown input content type {value!r}", field="type", **context)
        self.value = value


class InvalidContentShape(DecodeError):
    """Content value does not have the shape its role allows."""

    def __init__(self, role: str, detail: str, **context: Any) -> None:
        super().__init__(f"invalid content for role '{role}': {detail}", field="content", role=role, **context)


class MissingContentSource(DecodeError):
    def __init__(self, **context: Any) -> None:
        super().__init__("binary content requires at least one of 'id', 'url' or 'data'", **context)


class InvalidEnumValue(DecodeError):
    def __init__(self, field: str, value: object, allowed: Iterable[str], **context: Any) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        choices = ", ".join(repr(a) for a in self.allowed)
        super().__init__(f"field '{field}' must be one of {choices}, got {value!r}", field=field, **context)


class InvalidFieldType(DecodeError):
    """A field is present but its value has the wrong JSON type."""

    def __init__(self, field: str, detail: str, **context: Any) -> None:
        super().__init__(f"invalid value for field '{field}': {detail}", field=field, **context)


class MalformedPayload(DecodeError):
    """The payload is not well-formed JSON, or not a JSON object."""
