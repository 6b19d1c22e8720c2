from __future__ import annotations

"""JSON-like value types shared by every stablejson surface.

Two tiers over the same scalars: strict values are what the JSON codec may
see, permissive values may additionally carry the `ABSENT` marker anywhere in
the tree.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Literal, TypeAlias


class Absent(Enum):
    """Marker for "no value supplied", distinct from an explicit ``None``."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Literal[Absent.ABSENT] = Absent.ABSENT

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]

PermissiveValue: TypeAlias = (
    JSONScalar
    | Absent
    | Sequence["PermissiveValue"]
    | Mapping[str, "PermissiveValue"]
)
