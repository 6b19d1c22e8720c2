from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from stablejson.json_types import PermissiveValue
from stablejson.stringify import stable_stringify

T = TypeVar("T")
P = TypeVar("P", bound=PermissiveValue)


def dedupe_by(items: Iterable[T], key_of: Callable[[T], str]) -> list[T]:
    """Keep the first item for each distinct ``key_of(item)``.

    Returned items are the original objects in their original relative order.
    """
    seen: set[str] = set()
    unique: list[T] = []
    for item in items:
        key = key_of(item)
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def semantic_dedupe(items: Iterable[P]) -> list[P]:
    """Drop items whose stable string matches an earlier item's."""
    return dedupe_by(items, stable_stringify)
