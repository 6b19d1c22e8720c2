from __future__ import annotations

import pytest

from stablejson.exceptions import NeverThrown
from stablejson.order_contract import (
    KEY_ORDERS,
    casefold_order,
    codepoint_order,
    resolve_key_order,
    reverse_order,
    sort_keys,
)


def test_sort_keys_defaults_to_codepoint_order() -> None:
    assert sort_keys(["b", "a", "C"]) == ["C", "a", "b"]


def test_sort_keys_uses_comparator() -> None:
    assert sort_keys(["b", "a", "C"], casefold_order) == ["a", "b", "C"]
    assert sort_keys(["b", "a", "c"], reverse_order) == ["c", "b", "a"]


def test_codepoint_order_returns_unit_results() -> None:
    assert codepoint_order("a", "b") == -1
    assert codepoint_order("b", "a") == 1
    assert codepoint_order("a", "a") == 0


def test_casefold_order_breaks_ties_by_codepoint() -> None:
    assert sort_keys(["a", "A", "b"], casefold_order) == ["A", "a", "b"]


def test_sort_keys_rejects_non_numeric_comparator_results() -> None:
    def bad(a: str, b: str) -> int:
        return "less"  # type: ignore[return-value]

    with pytest.raises(NeverThrown):
        sort_keys(["a", "b"], bad)


def test_sort_keys_accepts_bool_and_float_comparator_results() -> None:
    def float_order(a: str, b: str) -> float:
        return float(ord(a[0]) - ord(b[0]))

    def bool_order(a: str, b: str) -> int | bool:
        if a < b:
            return -1
        return a > b

    assert sort_keys(["c", "a", "b"], float_order) == ["a", "b", "c"]
    assert sort_keys(["c", "b", "a", "b"], bool_order) == ["a", "b", "b", "c"]


@pytest.mark.parametrize("name", [None, "", "codepoint", " CodePoint "])
def test_resolve_key_order_defaults_to_plain_sort(name: str | None) -> None:
    assert resolve_key_order(name) is None


def test_resolve_key_order_named_orders() -> None:
    assert resolve_key_order("casefold") is KEY_ORDERS["casefold"]
    assert resolve_key_order("REVERSE") is reverse_order


def test_resolve_key_order_rejects_unknown_names() -> None:
    with pytest.raises(NeverThrown) as excinfo:
        resolve_key_order("locale")
    assert excinfo.value.payload["key_order"] == "locale"
    assert "codepoint" in excinfo.value.payload["allowed"]
