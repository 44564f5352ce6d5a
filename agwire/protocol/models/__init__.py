"""Data models for the protocol schema."""

from agwire.protocol.models.base import WireModel
from agwire.protocol.models.enums import (
    EventType,
    InputContentType,
    ReasoningEncryptedValueSubtype,
    Role,
    ToolCallType,
)
from agwire.protocol.models.events import (
    BaseEvent,
    Event,
    ReasoningEncryptedValueEvent,
    ReasoningEndEvent,
    ReasoningMessageChunkEvent,
    ReasoningMessageContentEvent,
    ReasoningMessageEndEvent,
    ReasoningMessageStartEvent,
    ReasoningStartEvent,
)
from agwire.protocol.models.input import (
    BinaryInputContent,
    InputContent,
    TextInputContent,
    binary_content,
    text_content,
)
from agwire.protocol.models.messages import (
    MESSAGE_TYPES,
    ActivityMessage,
    AssistantMessage,
    FunctionCall,
    Message,
    MessageBase,
    ReasoningMessage,
    ToolCall,
    ToolMessage,
    UserMessage,
    activity_message,
    assistant_message,
    reasoning_message,
    tool_message,
    user_message,
)
from agwire.protocol.models.run_input import Context, RunInput, Tool

__all__ = [
    # Messages
    "MESSAGE_TYPES",
    "ActivityMessage",
    "AssistantMessage",
    # Events
    "BaseEvent",
    # Input content
    "BinaryInputContent",
    # Run input
    "Context",
    "Event",
    # Enums
    "EventType",
    "FunctionCall",
    "InputContent",
    "InputContentType",
    "Message",
    "MessageBase",
    "ReasoningEncryptedValueEvent",
    "ReasoningEncryptedValueSubtype",
    "ReasoningEndEvent",
    "ReasoningMessage",
    "ReasoningMessageChunkEvent",
    "ReasoningMessageContentEvent",
    "ReasoningMessageEndEvent",
    "ReasoningMessageStartEvent",
    "ReasoningStartEvent",
    "Role",
    "RunInput",
    "TextInputContent",
    "Tool",
    "ToolCall",
    "ToolCallType",
    "ToolMessage",
    "UserMessage",
    "WireModel",
    "activity_message",
    "assistant_message",
    "binary_content",
    "reasoning_message",
    "text_content",
    "tool_message",
    "user_message",
]
