"""Value → JSON text.

The walk keeps an *ancestor set* of table ids for the current recursion path
only, so a table shared by two siblings encodes twice while a table reachable
from itself fails with :class:`CyclicReferenceError`.  Nothing is written
until the whole tree has been validated.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Set

from .classifier import Shape, array_values, classify
from .config import CODEC_CONFIG
from .errors import (
    CyclicReferenceError,
    DepthExceededError,
    EncodeError,
    InvalidKeyTypeError,
    InvalidNumberError,
    InvalidStringError,
    InvalidValueError,
    SparseArrayError,
)
from .json_util import dump_literal
from .models import Table, Value, fits_int64

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("tablejson.encoder")
LOGGER.addHandler(logging.NullHandler())


class TableEncoder:
    def __init__(self, max_depth: Optional[int] = None, config: Optional[Dict[str, Any]] = None):
        self.config = config or CODEC_CONFIG
        self.max_depth = max_depth if max_depth is not None else self.config["max_depth"]

    def encode(self, value: Value) -> str:
        out: List[str] = []
        try:
            self._write(value, out, set(), 0)
        except RecursionError:
            LOGGER.debug("recursion limit hit while encoding")
            raise DepthExceededError(self.max_depth) from None
        except EncodeError as e:
            LOGGER.debug("encode failed: %s", e)
            raise
        return "".join(out)

    # ------------------------------------------------------------------
    def _write(self, v: Value, out: List[str], ancestors: Set[int], depth: int) -> None:
        if v is None:
            out.append("null")
        elif v is True:
            out.append("true")
        elif v is False:
            out.append("false")
        elif isinstance(v, int):
            if not fits_int64(v):
                raise InvalidNumberError(f"integer {v} does not fit in 64 bits")
            out.append(str(int(v)))
        elif isinstance(v, float):
            out.append(_float_literal(v))
        elif isinstance(v, (str, bytes)):
            out.append(_string_literal(v))
        elif isinstance(v, Table):
            self._write_table(v, out, ancestors, depth + 1)
        else:
            raise InvalidValueError(f"cannot encode value of type {type(v).__name__}")

    def _write_table(self, t: Table, out: List[str], ancestors: Set[int], depth: int) -> None:
        if id(t) in ancestors:
            raise CyclicReferenceError()
        if depth > self.max_depth:
            raise DepthExceededError(self.max_depth)

        shape = classify(t)
        if shape is Shape.SPARSE:
            raise SparseArrayError()
        if shape is Shape.MIXED:
            raise InvalidKeyTypeError()
        if shape is Shape.EMPTY:
            out.append("[]")
            return

        ancestors.add(id(t))
        if shape is Shape.ARRAY:
            out.append("[")
            for i, item in enumerate(array_values(t)):
                if i:
                    out.append(",")
                self._write(item, out, ancestors, depth)
            out.append("]")
        else:
            out.append("{")
            for i, (k, item) in enumerate(t.items()):
                if i:
                    out.append(",")
                out.append(_string_literal(k))
                out.append(":")
                self._write(item, out, ancestors, depth)
            out.append("}")
        ancestors.discard(id(t))


# ── literal helpers ──────────────────────────────────────────
def _float_literal(f: float) -> str:
    if not math.isfinite(f):
        raise InvalidNumberError(f"cannot encode non-finite number {f!r}")
    text = dump_literal(f)
    # int 과 구분되도록 소수점/지수 표기 보장
    if not any(c in text for c in ".eE"):
        text += ".0"
    return text


def _string_literal(s) -> str:
    if isinstance(s, bytes):
        try:
            s = s.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidStringError(f"string is not valid UTF-8: {e.reason}") from e
    try:
        return dump_literal(s)
    except (TypeError, ValueError) as e:
        raise InvalidStringError(f"cannot encode string: {e}") from e


_DEFAULT = TableEncoder()


def encode(value: Value) -> str:
    """Encode *value* with the default configuration."""
    return _DEFAULT.encode(value)
