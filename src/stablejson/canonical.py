from __future__ import annotations

from collections.abc import Mapping

from stablejson.invariants import never
from stablejson.json_types import Absent, JSONObject, JSONValue, PermissiveValue
from stablejson.order_contract import KeyOrder, sort_keys


def canonicalize(value: PermissiveValue, key_order: KeyOrder | None = None) -> JSONValue:
    """Return the canonical strict form of ``value``.

    - ``ABSENT`` becomes ``None``, so absent sequence elements turn into nulls.
    - Mapping keys whose value is ``ABSENT`` are dropped, not nulled.
    - Mapping keys are emitted in ``key_order`` (code-point order by default),
      at every depth.
    - Sequences keep their length and order.

    The result shares no list or dict with the input. Cyclic input recurses
    until ``RecursionError``.
    """
    match value:
        case Absent.ABSENT:
            return None
        case None | str() | int() | float() | bool():
            return value
        case Mapping() as mapping:
            return _canonicalize_mapping(mapping, key_order)
        case list() | tuple() as sequence:
            return [canonicalize(item, key_order) for item in sequence]
        case set() | frozenset():
            never(
                "canonicalize() does not accept unordered set inputs",
                value_type=type(value).__name__,
            )
        case _:
            never(
                "canonicalize() received non-JSON value",
                value_type=type(value).__name__,
            )


def _canonicalize_mapping(
    mapping: Mapping[object, PermissiveValue],
    key_order: KeyOrder | None,
) -> JSONObject:
    present: list[str] = []
    for key, item in mapping.items():
        if not isinstance(key, str):
            never(
                "mapping keys must be strings",
                key=repr(key),
                key_type=type(key).__name__,
            )
        if item is not Absent.ABSENT:
            present.append(key)
    result: JSONObject = {}
    for key in sort_keys(present, key_order):
        result[key] = canonicalize(mapping[key], key_order)
    return result
