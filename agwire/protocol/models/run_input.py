"""Top-level run input payload.

One agent run request: the thread and run it belongs to, the conversation
so far, the tools the agent may call, and context entries.  ``state`` and
``forwarded_props`` are opaque JSON passed through without inspection.
"""

from __future__ import annotations

from pydantic import Field, JsonValue

from agwire.protocol.models.base import NonEmptyStr, WireModel
from agwire.protocol.models.messages import Message


class Tool(WireModel):
    """A tool the agent may call; ``parameters`` is a JSON Schema."""

    name: str
    description: str
    parameters: JsonValue = None


class Context(WireModel):
    description: str
    value: str


class RunInput(WireModel):
    """Decoded run request.  Message order is conversation order."""

    thread_id: NonEmptyStr
    run_id: NonEmptyStr
    parent_run_id: str | None = None
    state: JsonValue = None
    messages: list[Message] = Field(default_factory=list)
    tools: list[Tool] = Field(default_factory=list)
    context: list[Context] = Field(default_factory=list)
    forwarded_props: JsonValue = None

    def find_message(self, message_id: str) -> Message | None:
        """Return the first message with *message_id*, if any."""
        for message in self.messages:
            if message.id == message_id:
                return message
        return None
