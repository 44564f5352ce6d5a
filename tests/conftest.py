"""Shared fixtures: canonical run input payloads in both naming conventions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

from agwire.protocol.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_logging_and_settings() -> Iterator[None]:
    """Restore the default loguru sink and drop cached settings after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    get_settings.cache_clear()


@pytest.fixture
def camel_payload() -> dict[str, Any]:
    return {
        "threadId": "thread-1",
        "runId": "run-1",
        "parentRunId": "run-0",
        "state": {"mode": "test"},
        "messages": [
            {"id": "msg-1", "role": "user", "content": "hello"},
            {
                "id": "msg-2",
                "role": "assistant",
                "content": "hi",
                "encryptedContent": "enc-content-msg-2",
                "toolCalls": [
                    {
                        "id": "tc-1",
                        "type": "function",
                        "function": {"name": "tool", "arguments": "{}"},
                    }
                ],
            },
            {
                "id": "reasoning-1",
                "role": "reasoning",
                "content": "summary",
                "encryptedValue": "enc-reasoning-1",
            },
        ],
        "tools": [{"name": "tool", "description": "desc", "parameters": {"type": "object"}}],
        "context": [{"description": "ctx", "value": "val"}],
        "forwardedProps": {"traceId": "abc"},
    }


@pytest.fixture
def snake_payload() -> dict[str, Any]:
    return {
        "thread_id": "thread-2",
        "run_id": "run-2",
        "parent_run_id": "run-1",
        "state": {"mode": "snake"},
        "messages": [
            {
                "id": "msg-1",
                "role": "assistant",
                "content": "hi",
                "encrypted_content": "enc-content-msg-1",
                "tool_calls": [
                    {
                        "id": "tc-2",
                        "type": "function",
                        "function": {"name": "tool", "arguments": '{"x":1}'},
                    }
                ],
            },
            {
                "id": "msg-2",
                "role": "tool",
                "content": "ok",
                "encrypted_content": "enc-content-msg-2",
                "encrypted_value": "enc-msg-2",
                "tool_call_id": "tc-2",
                "error": "failed",
            },
            {
                "id": "msg-3",
                "role": "activity",
                "activity_type": "progress",
                "content": {"step": 1},
            },
            {
                "id": "reasoning-2",
                "role": "reasoning",
                "content": "thinking",
                "encrypted_value": "enc-reasoning-2",
            },
        ],
        "tools": [],
        "context": [],
        "forwarded_props": {"trace_id": "xyz"},
    }
