from __future__ import annotations

import json
from collections.abc import Callable
from typing import IO, Any

import click

from agwire.protocol.decoding import decode_event, decode_message, decode_run_input
from agwire.protocol.errors import DecodeError
from agwire.protocol.models import WireModel


@click.group()
@click.option("--log-level", default=None, help="Log level (default: from AGWIRE_LOG_LEVEL or INFO).")
def main(log_level: str | None) -> None:
    """agwire - decode and validate agent run payloads and reasoning events."""
    from agwire.protocol.log import setup_logging
    from agwire.protocol.settings import get_settings

    settings = get_settings()
    setup_logging(log_level or settings.log_level, serialize=settings.log_json)


def _run(decoder: Callable[[Any], WireModel], source: IO[bytes]) -> None:
    """Decode *source* and print the canonical camelCase JSON."""
    from agwire.protocol.settings import get_settings

    try:
        value = decoder(source.read())
    except DecodeError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from exc

    click.echo(json.dumps(value.to_wire(), indent=get_settings().json_indent, ensure_ascii=False))


@main.command("input")
@click.argument("source", type=click.File("rb"), default="-")
def input_command(source: IO[bytes]) -> None:
    """Decode a run input document (file path or - for stdin)."""
    _run(decode_run_input, source)


@main.command("message")
@click.argument("source", type=click.File("rb"), default="-")
def message_command(source: IO[bytes]) -> None:
    """Decode a single message."""
    _run(decode_message, source)


@main.command("event")
@click.argument("source", type=click.File("rb"), default="-")
def event_command(source: IO[bytes]) -> None:
    """Decode a reasoning event."""
    _run(decode_event, source)


if __name__ == "__main__":
    main()
