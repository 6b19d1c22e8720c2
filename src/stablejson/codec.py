"""JSON text boundary.

Only strict values are encoded, and key order is written exactly as the
mapping iterates; ordering is the canonicalizer's job.
"""

from __future__ import annotations

import json

from stablejson.exceptions import ParseError
from stablejson.json_types import JSONValue

_COMPACT_SEPARATORS = (",", ":")
_INDENTED_SEPARATORS = (",", ": ")


def encode(value: JSONValue, *, indent: int | str | None = None) -> str:
    if indent is None or indent == 0 or indent == "":
        # a zero or empty indent means compact output
        indent = None
    separators = _COMPACT_SEPARATORS if indent is None else _INDENTED_SEPARATORS
    return json.dumps(
        value,
        sort_keys=False,
        ensure_ascii=False,
        indent=indent,
        separators=separators,
    )


def _reject_constant(name: str) -> JSONValue:
    raise ParseError(f"Non-standard JSON constant: {name}")


def decode(text: str | bytes | bytearray) -> JSONValue:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"Invalid UTF-8 in JSON text: {exc}") from exc
    if not isinstance(text, str):
        raise ParseError(f"JSON text must be str, not {type(text).__name__}")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}", position=exc.pos) from exc
