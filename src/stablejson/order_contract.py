from __future__ import annotations

from functools import cmp_to_key
from numbers import Real
from typing import Callable, Iterable, TypeAlias

from stablejson.invariants import never

KeyOrder: TypeAlias = Callable[[str, str], float]


def codepoint_order(a: str, b: str) -> int:
    """Ascending code-point order; the default for mapping keys."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def casefold_order(a: str, b: str) -> int:
    folded = codepoint_order(a.casefold(), b.casefold())
    if folded:
        return folded
    return codepoint_order(a, b)


def reverse_order(a: str, b: str) -> int:
    return codepoint_order(b, a)


KEY_ORDERS: dict[str, KeyOrder] = {
    "codepoint": codepoint_order,
    "casefold": casefold_order,
    "reverse": reverse_order,
}


def resolve_key_order(name: str | None) -> KeyOrder | None:
    """Map a configured order name to its comparator.

    ``None``, an empty name and ``"codepoint"`` all resolve to ``None`` so
    callers fall back to plain ``sorted()``.
    """
    if name is None:
        return None
    normalized = name.strip().lower()
    if not normalized or normalized == "codepoint":
        return None
    comparator = KEY_ORDERS.get(normalized)
    if comparator is None:
        never(
            "unknown key order",
            key_order=name,
            allowed=sorted(KEY_ORDERS),
        )
    return comparator


def _checked(key_order: KeyOrder) -> KeyOrder:
    def _compare(a: str, b: str) -> float:
        result = key_order(a, b)
        if not isinstance(result, Real):
            never(
                "key order comparator must return a real number",
                left=a,
                right=b,
                result_type=type(result).__name__,
            )
        return result

    return _compare


def sort_keys(keys: Iterable[str], key_order: KeyOrder | None = None) -> list[str]:
    items = list(keys)
    if key_order is None:
        return sorted(items)
    return sorted(items, key=cmp_to_key(_checked(key_order)))
