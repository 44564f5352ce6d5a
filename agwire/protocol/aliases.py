"""Field-alias resolution for camelCase / snake_case wire payloads.

Every field of every wire model may arrive spelled either way
(``toolCallId`` or ``tool_call_id``).  Models never list aliases by hand:
the shared alias generator in :mod:`agwire.protocol.models.base` calls
:func:`validation_alias` for each field, so this module is the only place
the convention lives.

When a payload carries both spellings of the same field, camelCase wins.
Both spellings being present is not an error.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import AliasChoices
from pydantic.alias_generators import to_camel


class AliasPair(NamedTuple):
    """The two accepted wire spellings of one field, in precedence order."""

    camel: str
    snake: str


def wire_name(name: str) -> str:
    """Return the camelCase (outbound) spelling of a field name."""
    if "_" not in name:
        return name
    return to_camel(name)


def alias_pair(name: str) -> AliasPair:
    return AliasPair(camel=wire_name(name), snake=name)


def validation_alias(name: str) -> str | AliasChoices:
    """Alias generator hook: accept both spellings, camelCase first."""
    pair = alias_pair(name)
    if pair.camel == pair.snake:
        return pair.snake
    return AliasChoices(pair.camel, pair.snake)
