"""Reasoning event models.

Every event carries the base envelope (``type``, ``timestamp``, optional
``rawEvent``) plus a few event-specific fields.  Events are validated when
constructed or decoded, so ``to_json()`` on a live event never needs to
re-validate.
"""

from __future__ import annotations

import time
from typing import Annotated, Any, Literal

from pydantic import Field, JsonValue, TypeAdapter, field_validator, model_validator

from agwire.protocol.errors import EmptyRequiredField, MissingRequiredField
from agwire.protocol.models.base import NonEmptyStr, WireModel, enum_value
from agwire.protocol.models.enums import EventType, ReasoningEncryptedValueSubtype


def _now_ms() -> int:
    return int(time.time() * 1000)


class BaseEvent(WireModel):
    """Wire-format event envelope."""

    type: EventType
    timestamp: int | None = Field(default_factory=_now_ms)
    raw_event: JsonValue = None


# -- Lifecycle ---------------------------------------------------------------


class ReasoningStartEvent(BaseEvent):
    """Marks the start of a reasoning phase."""

    type: Literal[EventType.REASONING_START] = EventType.REASONING_START
    message_id: NonEmptyStr


class ReasoningEndEvent(BaseEvent):
    """Marks the end of a reasoning phase."""

    type: Literal[EventType.REASONING_END] = EventType.REASONING_END
    message_id: NonEmptyStr


# -- Streaming message -------------------------------------------------------


class ReasoningMessageStartEvent(BaseEvent):
    type: Literal[EventType.REASONING_MESSAGE_START] = EventType.REASONING_MESSAGE_START
    message_id: NonEmptyStr
    role: NonEmptyStr


class ReasoningMessageContentEvent(BaseEvent):
    type: Literal[EventType.REASONING_MESSAGE_CONTENT] = EventType.REASONING_MESSAGE_CONTENT
    message_id: NonEmptyStr
    delta: NonEmptyStr


class ReasoningMessageEndEvent(BaseEvent):
    type: Literal[EventType.REASONING_MESSAGE_END] = EventType.REASONING_MESSAGE_END
    message_id: NonEmptyStr


class ReasoningMessageChunkEvent(BaseEvent):
    """A chunk of reasoning message data.

    Both fields are optional but at least one must be present, and
    ``message_id`` must be non-empty when given.  ``delta`` may be empty.
    """

    type: Literal[EventType.REASONING_MESSAGE_CHUNK] = EventType.REASONING_MESSAGE_CHUNK
    message_id: str | None = None
    delta: str | None = None

    @field_validator("message_id")
    @classmethod
    def _validate_message_id(cls, value: str | None) -> str | None:
        if value is not None and not value:
            raise EmptyRequiredField("messageId")
        return value

    @model_validator(mode="after")
    def _validate_presence(self) -> ReasoningMessageChunkEvent:
        if self.message_id is None and self.delta is None:
            raise MissingRequiredField("messageId or delta")
        return self

    def with_message_id(self, message_id: str) -> ReasoningMessageChunkEvent:
        """Return a validated copy with ``message_id`` set."""
        return self._replace(message_id=message_id)

    def with_delta(self, delta: str) -> ReasoningMessageChunkEvent:
        """Return a validated copy with ``delta`` set."""
        return self._replace(delta=delta)

    def _replace(self, **changes: Any) -> ReasoningMessageChunkEvent:
        return self.model_validate({**self.model_dump(), **changes})


# -- Attachments -------------------------------------------------------------


class ReasoningEncryptedValueEvent(BaseEvent):
    """Attaches an encrypted reasoning value to a message or tool call."""

    type: Literal[EventType.REASONING_ENCRYPTED_VALUE] = EventType.REASONING_ENCRYPTED_VALUE
    subtype: ReasoningEncryptedValueSubtype
    entity_id: NonEmptyStr
    encrypted_value: NonEmptyStr

    @field_validator("subtype", mode="before")
    @classmethod
    def _validate_subtype(cls, value: Any) -> ReasoningEncryptedValueSubtype:
        return enum_value(ReasoningEncryptedValueSubtype, "subtype", value)


Event = Annotated[
    ReasoningStartEvent
    | ReasoningEndEvent
    | ReasoningMessageStartEvent
    | ReasoningMessageContentEvent
    | ReasoningMessageEndEvent
    | ReasoningMessageChunkEvent
    | ReasoningEncryptedValueEvent,
    Field(discriminator="type"),
]

EVENT_ADAPTER: TypeAdapter[Event] = TypeAdapter(Event)
