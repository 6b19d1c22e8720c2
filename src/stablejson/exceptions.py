"""Exception types raised by stablejson."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when text handed to the JSON decoder is not well-formed.

    ``position`` is the character offset reported by the decoder, or ``None``
    when the failure did not come from a located syntax error.
    """

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class NeverThrown(RuntimeError):
    """Raised by ``never()`` when a path assumed unreachable is reached.

    Input outside the JSON-like data model is the usual way to get here, so
    the payload records what was seen and where.
    """

    def __init__(self, message: str, *, payload: dict[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.payload: dict[str, object] = dict(payload or {})

    @property
    def payload_dict(self) -> dict[str, object]:
        return {"reason": self.reason, **{str(k): v for k, v in self.payload.items()}}
