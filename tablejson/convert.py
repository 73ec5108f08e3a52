"""General-purpose conversion between plain Python values and the value model.

:func:`from_native` lifts already-decoded Python data (lists, tuples, dicts,
scalars) into Values.  It deliberately has no case for
:class:`~tablejson.models.NumberToken`: a token is a ``str`` and converts to
a String of its literal text.  Numeric typing of tokens is the decoder's job.

:func:`to_native` goes the other way and is what tests and the CLI use to
compare tables by content.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Set

from .classifier import Shape, array_values, classify
from .config import CODEC_CONFIG
from .errors import (
    CyclicReferenceError,
    DepthExceededError,
    InvalidKeyTypeError,
    SparseArrayError,
)
from .models import Table, Value


class NativeConverter:
    """Recursive Python → Value builder.

    Subclasses hook :meth:`convert_scalar` to change how leaf values map.
    """

    def __init__(self, max_depth: Optional[int] = None, config: Optional[Dict[str, Any]] = None):
        self.config = config or CODEC_CONFIG
        self.max_depth = max_depth if max_depth is not None else self.config["max_depth"]

    def convert(self, obj: Any) -> Value:
        try:
            return self._visit(obj, 0)
        except RecursionError:
            raise DepthExceededError(self.max_depth) from None

    # ------------------------------------------------------------------
    def _visit(self, obj: Any, depth: int) -> Value:
        if isinstance(obj, Table):
            return obj
        if isinstance(obj, (list, tuple)):
            self._check_depth(depth + 1)
            t = Table()
            for i, item in enumerate(obj, start=1):
                t[i] = self._visit(item, depth + 1)
            return t
        if isinstance(obj, dict):
            self._check_depth(depth + 1)
            t = Table()
            for k, item in obj.items():
                t[k] = self._visit(item, depth + 1)
            return t
        return self.convert_scalar(obj)

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            raise DepthExceededError(self.max_depth)

    def convert_scalar(self, obj: Any) -> Value:
        if obj is None or isinstance(obj, (bool, int, float, bytes)):
            return obj
        if isinstance(obj, str):
            # NumberToken 도 여기로 떨어짐 → 리터럴 문자열 그대로
            return str(obj)
        raise TypeError(f"cannot convert {type(obj).__name__} to a table value")


def from_native(obj: Any, max_depth: Optional[int] = None) -> Value:
    return NativeConverter(max_depth=max_depth).convert(obj)


# ──────────────────────────────────────────────────────────────
# Value → plain Python
# ──────────────────────────────────────────────────────────────
def to_native(value: Value) -> Any:
    """Project *value* onto lists/dicts; the empty table becomes ``[]``.

    Raises the same shape errors as the encoder for tables JSON cannot hold.
    """
    return _project(value, set())


def _project(value: Value, ancestors: Set[int]) -> Any:
    if not isinstance(value, Table):
        return value
    if id(value) in ancestors:
        raise CyclicReferenceError()
    shape = classify(value)
    if shape is Shape.SPARSE:
        raise SparseArrayError()
    if shape is Shape.MIXED:
        raise InvalidKeyTypeError()

    ancestors.add(id(value))
    try:
        if shape is Shape.OBJECT:
            return {k: _project(v, ancestors) for k, v in value.items()}
        return [_project(v, ancestors) for v in array_values(value)]
    finally:
        ancestors.discard(id(value))
