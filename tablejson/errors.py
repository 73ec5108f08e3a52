"""Exception hierarchy for the Value ↔ JSON codec.

Every error carries a ``kind`` tag so callers at the host boundary can match
on it without importing the concrete classes.
"""
from __future__ import annotations

from typing import Optional


class TableJSONError(RuntimeError):
    """Base class of every codec error."""

    kind = "Error"


# ── encode side ────────────────────────────────────────────────
class EncodeError(TableJSONError):
    """Raised when a value cannot be encoded as JSON text."""

    kind = "EncodeError"


class SparseArrayError(EncodeError):
    kind = "SparseArray"

    def __init__(self, message: str = "cannot encode sparse array"):
        super().__init__(message)


class InvalidKeyTypeError(EncodeError):
    kind = "InvalidKeyType"

    def __init__(self, message: str = "cannot encode mixed or invalid key types"):
        super().__init__(message)


class CyclicReferenceError(EncodeError):
    kind = "CyclicReference"

    def __init__(self, message: str = "cannot encode recursively nested tables to JSON"):
        super().__init__(message)


class InvalidStringError(EncodeError):
    kind = "InvalidString"


class InvalidNumberError(EncodeError):
    kind = "InvalidNumber"


class InvalidValueError(EncodeError):
    kind = "InvalidValue"


# ── decode side ────────────────────────────────────────────────
class DecodeError(TableJSONError):
    """Raised when JSON text cannot be decoded into a value."""

    kind = "DecodeError"


class JSONSyntaxError(DecodeError):
    """Malformed JSON; keeps the parser's diagnostic and position."""

    kind = "SyntaxError"

    def __init__(
        self,
        msg: str,
        pos: Optional[int] = None,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
    ):
        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        if lineno is not None:
            text = f"{msg}: line {lineno} column {colno} (char {pos})"
        else:
            text = msg
        super().__init__(text)


# ── both ───────────────────────────────────────────────────────
class DepthExceededError(EncodeError, DecodeError):
    """Nesting deeper than the configured ``max_depth``."""

    kind = "DepthExceeded"

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"nesting depth exceeds the maximum of {max_depth}")


__all__ = [
    "TableJSONError",
    "EncodeError",
    "SparseArrayError",
    "InvalidKeyTypeError",
    "CyclicReferenceError",
    "InvalidStringError",
    "InvalidNumberError",
    "InvalidValueError",
    "DecodeError",
    "JSONSyntaxError",
    "DepthExceededError",
]
