"""stablejson package root."""

from stablejson.canonical import canonicalize
from stablejson.compare import semantic_equals
from stablejson.dedupe import dedupe_by, semantic_dedupe
from stablejson.exceptions import NeverThrown, ParseError
from stablejson.invariants import never
from stablejson.json_types import ABSENT, Absent, JSONValue, PermissiveValue
from stablejson.parse import ParseFailure, ParseOk, ParseResult, parse_safe, parse_strict
from stablejson.stringify import stable_digest, stable_stringify

__all__ = [
    "__version__",
    "ABSENT",
    "Absent",
    "JSONValue",
    "NeverThrown",
    "ParseError",
    "ParseFailure",
    "ParseOk",
    "ParseResult",
    "PermissiveValue",
    "canonicalize",
    "dedupe_by",
    "never",
    "parse_safe",
    "parse_strict",
    "semantic_dedupe",
    "semantic_equals",
    "stable_digest",
    "stable_stringify",
]

__version__ = "0.1.0"
