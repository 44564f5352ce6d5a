"""Public decode entry points.

Each function accepts a JSON document (``bytes`` / ``str``) or an already
parsed mapping, validates it, and returns a fresh immutable value.  Every
failure is raised as a :class:`~agwire.protocol.errors.DecodeError`; there
is no partial result.  Decoding is pure and keeps no shared state, so it is
safe to call from any number of threads.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from agwire.protocol.errors import DecodeError, InvalidEnumValue, MalformedPayload, UnknownContentType
from agwire.protocol.log import rejection_logger
from agwire.protocol.models import Event, EventType, InputContent, Message, RunInput, WireModel
from agwire.protocol.models.events import EVENT_ADAPTER
from agwire.protocol.models.input import INPUT_CONTENT_ADAPTER
from agwire.protocol.models.messages import MESSAGE_ADAPTER
from agwire.protocol.validation import translate

T = TypeVar("T")

Payload = bytes | bytearray | str | Mapping[str, Any]

_RUN_INPUT_ADAPTER: TypeAdapter[RunInput] = TypeAdapter(RunInput)


def load_payload(payload: Payload) -> Any:
    """Parse JSON text; already parsed values are returned unchanged."""
    if not isinstance(payload, bytes | bytearray | str):
        return payload
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayload(f"payload is not valid JSON: {exc}") from exc


def _decode(
    adapter: TypeAdapter[T],
    payload: Payload,
    what: str,
    unknown_tag: Callable[[Any], DecodeError] | None = None,
) -> T:
    raw = load_payload(payload)
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        error = translate(exc, raw, unknown_tag=unknown_tag)
        rejection_logger(error).warning("Rejected {} payload: {}", what, error)
        # Keep a cause set inside a validator.
        if error.__cause__ is not None:
            raise error  # noqa: B904
        raise error from exc


def decode_run_input(payload: Payload) -> RunInput:
    """Decode a run input.  Any malformed message fails the whole decode."""
    run_input = _decode(_RUN_INPUT_ADAPTER, payload, "run input")

    duplicates = [mid for mid, count in Counter(m.id for m in run_input.messages).items() if count > 1]
    if duplicates:
        logger.warning("Run {} has duplicate message ids: {}", run_input.run_id, ", ".join(duplicates))

    logger.debug(
        "Decoded run input thread={} run={} ({} messages, {} tools)",
        run_input.thread_id,
        run_input.run_id,
        len(run_input.messages),
        len(run_input.tools),
    )
    return run_input


def decode_message(payload: Payload) -> Message:
    """Decode one role-tagged message."""
    message = _decode(MESSAGE_ADAPTER, payload, "message")
    logger.debug("Decoded {} message {}", message.role, message.id)
    return message


def decode_input_content(payload: Payload) -> InputContent:
    """Decode one multimodal input part."""
    part = _decode(INPUT_CONTENT_ADAPTER, payload, "input content", unknown_tag=UnknownContentType)
    logger.debug("Decoded {} input content", part.type)
    return part


def _unknown_event_type(tag: Any) -> DecodeError:
    return InvalidEnumValue("type", tag, [member.value for member in EventType])


def decode_event(payload: Payload) -> Event:
    """Decode any reasoning event, dispatching on ``type``."""
    event = _decode(EVENT_ADAPTER, payload, "event", unknown_tag=_unknown_event_type)
    logger.debug("Decoded {} event", event.type)
    return event


def to_json(value: WireModel) -> bytes:
    """Serialize a decoded value to camelCase JSON bytes."""
    return value.to_json()
