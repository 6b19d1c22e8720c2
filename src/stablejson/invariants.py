"""Invariant markers for stablejson."""

from __future__ import annotations

from typing import NoReturn

from stablejson.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as unreachable for well-formed input.

    The env payload is attached to the raised ``NeverThrown`` so callers can
    see which value broke the contract.
    """
    raise NeverThrown(reason or "never() marker reached", payload=dict(env))
