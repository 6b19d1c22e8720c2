from __future__ import annotations

from stablejson.json_types import ABSENT, PermissiveValue
from stablejson.stringify import stable_stringify

_FAST_PATH_TYPES = (str, int, bool)


def _same_scalar(a: PermissiveValue, b: PermissiveValue) -> bool:
    if a is ABSENT or a is None:
        return a is b
    # floats are left to the stringifier: -0.0 == 0.0 but they encode differently
    return type(a) in _FAST_PATH_TYPES and type(a) is type(b) and a == b


def semantic_equals(a: PermissiveValue, b: PermissiveValue) -> bool:
    """True when ``a`` and ``b`` have the same stable string.

    Key order, absent mapping values and absent-versus-null elements do not
    matter; sequence order does.
    """
    if _same_scalar(a, b):
        return True
    return stable_stringify(a) == stable_stringify(b)
