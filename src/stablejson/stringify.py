from __future__ import annotations

import hashlib
from typing import Callable, TypeAlias, TypeVar

from stablejson.canonical import canonicalize
from stablejson.codec import encode
from stablejson.json_types import JSONValue, PermissiveValue

T = TypeVar("T")

Canonicalizer: TypeAlias = Callable[[PermissiveValue], JSONValue]
Stringifier: TypeAlias = Callable[[T], str]


def stable_stringify(
    value: PermissiveValue,
    canonicalizer: Canonicalizer = canonicalize,
    indent: int | str | None = None,
) -> str:
    """Encode the canonical form of ``value`` as JSON text.

    ``canonicalizer`` may be any function from permissive to strict values;
    ``indent`` changes whitespace only.
    """
    return encode(canonicalizer(value), indent=indent)


def stable_digest(
    value: PermissiveValue,
    canonicalizer: Canonicalizer = canonicalize,
) -> str:
    encoded = stable_stringify(value, canonicalizer).encode("utf-8", "surrogatepass")
    return hashlib.sha256(encoded).hexdigest()
