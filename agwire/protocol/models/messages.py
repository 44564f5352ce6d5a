"""Role-tagged conversation messages.

``Message`` is a closed union discriminated by ``role``.  Each variant
declares the fields its role requires; the shape of ``content`` is decided
by :func:`agwire.protocol.content.resolve_content`.

``encryptedContent``, ``encryptedValue``, ``toolCalls`` and ``error`` are
decoded on every role and kept as given, even where only one role gives
them meaning (``toolCalls`` on assistant, ``error`` on tool).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import Field, JsonValue, TypeAdapter, ValidationInfo, field_validator

from agwire.protocol.content import resolve_content
from agwire.protocol.errors import DecodeError, InvalidFieldType
from agwire.protocol.models.base import NonEmptyStr, WireModel, enum_value
from agwire.protocol.models.enums import Role, ToolCallType
from agwire.protocol.models.input import InputContent

# -- Tool calls --------------------------------------------------------------


class FunctionCall(WireModel):
    """Name and JSON-encoded arguments of a function invocation."""

    name: str
    arguments: str

    def parsed_arguments(self) -> Any:
        """Parse ``arguments``.  The string is opaque until this is called."""
        try:
            return json.loads(self.arguments)
        except json.JSONDecodeError as exc:
            raise InvalidFieldType("arguments", f"not valid JSON: {exc.msg}") from exc


class ToolCall(WireModel):
    id: str
    type: ToolCallType = ToolCallType.FUNCTION
    function: FunctionCall

    @field_validator("type", mode="before")
    @classmethod
    def _validate_type(cls, value: Any) -> ToolCallType:
        return enum_value(ToolCallType, "type", value)


# -- Messages ----------------------------------------------------------------


class MessageBase(WireModel):
    """Fields and projections shared by every message variant."""

    id: NonEmptyStr
    role: Role
    encrypted_content: str | None = None
    encrypted_value: str | None = None
    tool_calls: list[ToolCall] | None = None
    error: str | None = None

    @field_validator("content", mode="before", check_fields=False)
    @classmethod
    def _resolve_content(cls, value: Any, info: ValidationInfo) -> Any:
        role = cls.model_fields["role"].default
        try:
            return resolve_content(role, value)
        except DecodeError as exc:
            exc.with_context(message_id=info.data.get("id"))
            raise

    def content_text(self) -> str | None:
        """Return the content as a plain string, if the role and shape permit."""
        if self.role == Role.ACTIVITY:
            return None
        content = getattr(self, "content", None)
        return content if isinstance(content, str) else None

    def content_parts(self) -> list[InputContent] | None:
        """Return the content as input parts, if this is a user message carrying a list."""
        if self.role != Role.USER:
            return None
        content = getattr(self, "content", None)
        return list(content) if isinstance(content, list) else None

    def activity_content(self) -> dict[str, Any] | None:
        """Return the structured content of an activity message."""
        if self.role != Role.ACTIVITY:
            return None
        content = getattr(self, "content", None)
        return content if isinstance(content, dict) else None


class UserMessage(MessageBase):
    role: Literal[Role.USER] = Role.USER
    content: str | list[InputContent]


class AssistantMessage(MessageBase):
    role: Literal[Role.ASSISTANT] = Role.ASSISTANT
    content: str | None = None


class ToolMessage(MessageBase):
    """Result of a tool call, linked back to it by ``tool_call_id``."""

    role: Literal[Role.TOOL] = Role.TOOL
    content: str
    tool_call_id: NonEmptyStr


class ActivityMessage(MessageBase):
    role: Literal[Role.ACTIVITY] = Role.ACTIVITY
    activity_type: NonEmptyStr
    content: dict[str, JsonValue]


class ReasoningMessage(MessageBase):
    """Reasoning summary; ``content`` is the summary text."""

    role: Literal[Role.REASONING] = Role.REASONING
    content: str


Message = Annotated[
    UserMessage | AssistantMessage | ToolMessage | ActivityMessage | ReasoningMessage,
    Field(discriminator="role"),
]

MESSAGE_TYPES: Mapping[Role, type[MessageBase]] = MappingProxyType(
    {
        Role.USER: UserMessage,
        Role.ASSISTANT: AssistantMessage,
        Role.TOOL: ToolMessage,
        Role.ACTIVITY: ActivityMessage,
        Role.REASONING: ReasoningMessage,
    }
)

MESSAGE_ADAPTER: TypeAdapter[Message] = TypeAdapter(Message)


# ---------------------------------------------------------------------------
# Convenience constructors
# ---------------------------------------------------------------------------


def user_message(message_id: str, content: str | list[InputContent]) -> UserMessage:
    return UserMessage(id=message_id, content=content)


def assistant_message(
    message_id: str,
    content: str | None = None,
    *,
    tool_calls: list[ToolCall] | None = None,
    encrypted_content: str | None = None,
) -> AssistantMessage:
    return AssistantMessage(
        id=message_id, content=content, tool_calls=tool_calls, encrypted_content=encrypted_content
    )


def tool_message(message_id: str, tool_call_id: str, content: str, *, error: str | None = None) -> ToolMessage:
    return ToolMessage(id=message_id, tool_call_id=tool_call_id, content=content, error=error)


def activity_message(message_id: str, activity_type: str, content: dict[str, Any]) -> ActivityMessage:
    return ActivityMessage(id=message_id, activity_type=activity_type, content=content)


def reasoning_message(message_id: str, summary: str, *, encrypted_value: str | None = None) -> ReasoningMessage:
    return ReasoningMessage(id=message_id, content=summary, encrypted_value=encrypted_value)
