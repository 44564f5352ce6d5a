"""Shared enumerations used across the protocol schema.

Values are the literal wire tags; enums always serialize as strings.
"""

from __future__ import annotations

from enum import StrEnum

# -- Messages ----------------------------------------------------------------


class Role(StrEnum):
    """Message role; selects required fields and the legal content shape."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    ACTIVITY = "activity"
    REASONING = "reasoning"


class ToolCallType(StrEnum):
    FUNCTION = "function"


# -- Input content -----------------------------------------------------------


class InputContentType(StrEnum):
    """Multimodal part type in user message content."""

    TEXT = "text"
    BINARY = "binary"


# -- Events ------------------------------------------------------------------


class EventType(StrEnum):
    """Reasoning event types."""

    # Lifecycle
    REASONING_START = "REASONING_START"
    REASONING_END = "REASONING_END"

    # Streaming message
    REASONING_MESSAGE_START = "REASONING_MESSAGE_START"
    REASONING_MESSAGE_CONTENT = "REASONING_MESSAGE_CONTENT"
    REASONING_MESSAGE_END = "REASONING_MESSAGE_END"
    REASONING_MESSAGE_CHUNK = "REASONING_MESSAGE_CHUNK"

    # Attachments
    REASONING_ENCRYPTED_VALUE = "REASONING_ENCRYPTED_VALUE"


class ReasoningEncryptedValueSubtype(StrEnum):
    """Entity an encrypted reasoning value is attached to."""

    TOOL_CALL = "tool-call"
    MESSAGE = "message"
