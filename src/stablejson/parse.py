from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from stablejson.codec import decode
from stablejson.exceptions import ParseError
from stablejson.json_types import JSONValue


@dataclass(frozen=True)
class ParseOk:
    value: JSONValue
    ok: Literal[True] = True


@dataclass(frozen=True)
class ParseFailure:
    error: ParseError
    ok: Literal[False] = False


ParseResult: TypeAlias = ParseOk | ParseFailure


def parse_strict(text: str) -> JSONValue:
    """Decode JSON text, raising ``ParseError`` when it is malformed."""
    return decode(text)


def parse_safe(text: str) -> ParseResult:
    """Decode JSON text without raising.

    Every failure comes back as ``ParseFailure`` holding a ``ParseError``;
    anything else the decoder raises is wrapped so the error type is uniform.
    """
    try:
        return ParseOk(parse_strict(text))
    except ParseError as exc:
        return ParseFailure(exc)
    except Exception as exc:
        wrapped = ParseError(f"Unknown parsing error: {exc}")
        wrapped.__cause__ = exc
        return ParseFailure(wrapped)
