"""Unit tests for run input decoding."""

from __future__ import annotations

import json
from typing import Any

import pytest
from pydantic import ValidationError

from agwire.protocol.decoding import decode_run_input
from agwire.protocol.errors import (
    EmptyRequiredField,
    InvalidContentShape,
    InvalidFieldType,
    MalformedPayload,
    MissingRequiredField,
    UnknownRole,
)
from agwire.protocol.models import (
    ActivityMessage,
    AssistantMessage,
    ReasoningMessage,
    Role,
    ToolMessage,
)

_SNAKE_KEYS = {
    "threadId": "thread_id",
    "runId": "run_id",
    "parentRunId": "parent_run_id",
    "forwardedProps": "forwarded_props",
    "encryptedContent": "encrypted_content",
    "encryptedValue": "encrypted_value",
    "toolCalls": "tool_calls",
    "toolCallId": "tool_call_id",
    "activityType": "activity_type",
    "mimeType": "mime_type",
}

_OPAQUE_KEYS = {"state", "forwardedProps", "parameters", "content"}


def _to_snake(value: Any, key: str | None = None) -> Any:
    """Rename structural keys to snake_case, leaving opaque values untouched."""
    if key in _OPAQUE_KEYS and not isinstance(value, list):
        return value
    if isinstance(value, dict):
        return {_SNAKE_KEYS.get(k, k): _to_snake(v, k) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_snake(v) for v in value]
    return value


# ---------------------------------------------------------------------------
# Naming conventions
# ---------------------------------------------------------------------------


def test_camel_case(camel_payload: dict[str, Any]) -> None:
    run = decode_run_input(json.dumps(camel_payload).encode())

    assert run.thread_id == "thread-1"
    assert run.run_id == "run-1"
    assert run.parent_run_id == "run-0"
    assert run.state == {"mode": "test"}

    assert len(run.messages) == 3
    assert run.messages[0].role == Role.USER
    assistant = run.messages[1]
    assert isinstance(assistant, AssistantMessage)
    assert assistant.id == "msg-2"
    assert assistant.tool_calls is not None
    assert len(assistant.tool_calls) == 1
    assert assistant.tool_calls[0].function.name == "tool"
    assert assistant.encrypted_content == "enc-content-msg-2"

    reasoning = run.messages[2]
    assert isinstance(reasoning, ReasoningMessage)
    assert reasoning.encrypted_value == "enc-reasoning-1"
    assert reasoning.content_text() == "summary"

    assert len(run.tools) == 1
    assert run.tools[0].name == "tool"
    assert run.tools[0].parameters == {"type": "object"}
    assert len(run.context) == 1
    assert run.context[0].description == "ctx"
    assert run.forwarded_props == {"traceId": "abc"}


def test_snake_case(snake_payload: dict[str, Any]) -> None:
    run = decode_run_input(json.dumps(snake_payload))

    assert run.thread_id == "thread-2"
    assert run.run_id == "run-2"
    assert run.parent_run_id == "run-1"
    assert len(run.messages) == 4

    assistant = run.messages[0]
    assert isinstance(assistant, AssistantMessage)
    assert assistant.encrypted_content == "enc-content-msg-1"
    assert assistant.tool_calls is not None
    assert assistant.tool_calls[0].id == "tc-2"

    tool = run.messages[1]
    assert isinstance(tool, ToolMessage)
    assert tool.tool_call_id == "tc-2"
    assert tool.error == "failed"
    assert tool.encrypted_content == "enc-content-msg-2"
    assert tool.encrypted_value == "enc-msg-2"
    assert tool.content == "ok"

    activity = run.messages[2]
    assert isinstance(activity, ActivityMessage)
    assert activity.activity_type == "progress"
    assert activity.activity_content() == {"step": 1}

    reasoning = run.messages[3]
    assert isinstance(reasoning, ReasoningMessage)
    assert reasoning.encrypted_value == "enc-reasoning-2"
    assert reasoning.content_text() == "thinking"

    # Opaque values keep their own key spelling.
    assert run.forwarded_props == {"trace_id": "xyz"}
    assert run.tools == []
    assert run.context == []


@pytest.mark.parametrize("fixture", ["camel_payload", "snake_payload"])
def test_conventions_decode_equal(fixture: str, request: pytest.FixtureRequest) -> None:
    payload = request.getfixturevalue(fixture)
    assert decode_run_input(payload) == decode_run_input(_to_snake(payload))


def test_snake_helper_renames_keys(camel_payload: dict[str, Any]) -> None:
    snake = _to_snake(camel_payload)
    assert "thread_id" in snake
    assert "tool_calls" in snake["messages"][1]
    assert snake["forwarded_props"] == {"traceId": "abc"}


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def test_minimal_payload_defaults() -> None:
    run = decode_run_input({"threadId": "t", "runId": "r"})
    assert run.parent_run_id is None
    assert run.state is None
    assert run.messages == []
    assert run.tools == []
    assert run.context == []
    assert run.forwarded_props is None


def test_message_order_preserved() -> None:
    messages = [{"id": f"m{i}", "role": "user", "content": str(i)} for i in range(10)]
    run = decode_run_input({"threadId": "t", "runId": "r", "messages": messages})
    assert [m.id for m in run.messages] == [f"m{i}" for i in range(10)]


@pytest.mark.parametrize("state", [[1, 2, 3], "text", 42, {"deep": {"list": [None, True, 1.5]}}])
def test_state_is_opaque(state: Any) -> None:
    run = decode_run_input({"threadId": "t", "runId": "r", "state": state, "forwardedProps": state})
    assert run.state == state
    assert run.forwarded_props == state


def test_duplicate_message_ids_are_accepted() -> None:
    messages = [
        {"id": "dup", "role": "user", "content": "a"},
        {"id": "dup", "role": "assistant", "content": "b"},
    ]
    run = decode_run_input({"threadId": "t", "runId": "r", "messages": messages})
    assert len(run.messages) == 2
    assert run.find_message("dup") is run.messages[0]
    assert run.find_message("missing") is None


def test_round_trip(camel_payload: dict[str, Any], snake_payload: dict[str, Any]) -> None:
    for payload in (camel_payload, snake_payload):
        run = decode_run_input(payload)
        assert decode_run_input(run.to_json()) == run


def test_serialization_is_camel_case(snake_payload: dict[str, Any]) -> None:
    wire = decode_run_input(snake_payload).to_wire()
    assert wire["threadId"] == "thread-2"
    assert wire["forwardedProps"] == {"trace_id": "xyz"}
    assert wire["messages"][1]["toolCallId"] == "tc-2"
    assert "thread_id" not in wire


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


def test_missing_thread_id() -> None:
    with pytest.raises(MissingRequiredField) as exc_info:
        decode_run_input({"runId": "r"})
    assert exc_info.value.field == "threadId"


def test_one_bad_message_fails_the_whole_input(camel_payload: dict[str, Any]) -> None:
    camel_payload["messages"].append({"id": "bad", "role": "tool", "content": "ok"})
    with pytest.raises(MissingRequiredField) as exc_info:
        decode_run_input(camel_payload)
    err = exc_info.value
    assert err.field == "toolCallId"
    assert err.message_id == "bad"
    assert err.role == "tool"
    assert err.path == "messages[3].toolCallId"


def test_bad_content_shape_is_localized(camel_payload: dict[str, Any]) -> None:
    camel_payload["messages"][0]["content"] = {"not": "allowed"}
    with pytest.raises(InvalidContentShape) as exc_info:
        decode_run_input(camel_payload)
    err = exc_info.value
    assert err.message_id == "msg-1"
    assert err.role == "user"
    assert err.path == "messages[0].content"


def test_unknown_role_reports_message_id(camel_payload: dict[str, Any]) -> None:
    camel_payload["messages"][2]["role"] = "critic"
    with pytest.raises(UnknownRole) as exc_info:
        decode_run_input(camel_payload)
    assert exc_info.value.message_id == "reasoning-1"
    assert exc_info.value.path == "messages[2]"


def test_tools_wrong_type() -> None:
    with pytest.raises(InvalidFieldType) as exc_info:
        decode_run_input({"threadId": "t", "runId": "r", "tools": "none"})
    assert exc_info.value.field == "tools"


def test_malformed_json() -> None:
    with pytest.raises(MalformedPayload):
        decode_run_input(b'{"threadId": ')


def test_not_an_object() -> None:
    with pytest.raises(MalformedPayload):
        decode_run_input(b"[1, 2, 3]")


def test_bad_part_keeps_its_own_error_as_cause(camel_payload: dict[str, Any]) -> None:
    camel_payload["messages"][0]["content"] = [{"type": "binary", "url": "https://example.com/a.png"}]
    with pytest.raises(InvalidContentShape) as exc_info:
        decode_run_input(camel_payload)
    err = exc_info.value
    assert isinstance(err.__cause__, MissingRequiredField)
    assert err.__cause__.field == "mimeType"
    assert str(err) == (
        "invalid content for role 'user': content[0]: missing required field 'mimeType' "
        "(at messages[0].content, message_id='msg-1', role='user')"
    )


def test_error_without_cause_chains_to_validation_error() -> None:
    with pytest.raises(EmptyRequiredField) as exc_info:
        decode_run_input({"threadId": "", "runId": "r"})
    assert isinstance(exc_info.value.__cause__, ValidationError)
