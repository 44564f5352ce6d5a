"""Unit tests for camelCase / snake_case field resolution."""

from __future__ import annotations

import pytest
from pydantic import AliasChoices

from agwire.protocol.aliases import AliasPair, alias_pair, validation_alias, wire_name
from agwire.protocol.decoding import decode_input_content, decode_message, decode_run_input


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("id", "id"),
        ("tool_call_id", "toolCallId"),
        ("mime_type", "mimeType"),
        ("forwarded_props", "forwardedProps"),
        ("toolCallId", "toolCallId"),
    ],
)
def test_wire_name(name: str, expected: str) -> None:
    assert wire_name(name) == expected


def test_alias_pair() -> None:
    assert alias_pair("activity_type") == AliasPair(camel="activityType", snake="activity_type")


def test_validation_alias_single_word() -> None:
    assert validation_alias("content") == "content"


def test_validation_alias_choices_camel_first() -> None:
    alias = validation_alias("run_id")
    assert isinstance(alias, AliasChoices)
    assert alias.choices == ["runId", "run_id"]


# ---------------------------------------------------------------------------
# Precedence applied by the models
# ---------------------------------------------------------------------------


def test_message_both_spellings_camel_wins() -> None:
    msg = decode_message(
        {"id": "m1", "role": "tool", "content": "ok", "toolCallId": "camel", "tool_call_id": "snake"}
    )
    assert msg.tool_call_id == "camel"


def test_run_input_both_spellings_camel_wins() -> None:
    run = decode_run_input({"threadId": "t-camel", "thread_id": "t-snake", "run_id": "r"})
    assert run.thread_id == "t-camel"
    assert run.run_id == "r"


def test_input_content_mixed_spellings() -> None:
    part = decode_input_content({"type": "binary", "mime_type": "image/png", "mimeType": "image/jpeg", "url": "u"})
    assert part.mime_type == "image/jpeg"


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "m1", "role": "tool", "content": "ok", "toolCallId": "tc"},
        {"id": "m1", "role": "tool", "content": "ok", "tool_call_id": "tc"},
    ],
)
def test_message_either_spelling(payload: dict[str, str]) -> None:
    assert decode_message(payload).tool_call_id == "tc"


def test_both_spellings_camel_wins_on_optional_field() -> None:
    msg = decode_message(
        {"id": "m1", "role": "assistant", "encrypted_value": "snake", "encryptedValue": "camel"}
    )
    assert msg.encrypted_value == "camel"
