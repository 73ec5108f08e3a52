"""JSON text → Value.

* Parsing is delegated to stdlib ``json`` with number literals kept as
  :class:`NumberToken` text.
* Each token is typed from its lexical form: ``10`` → int, ``10.0`` → float.
* Adds **JSONSyntaxError** carrying the parser's position.
"""
from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Dict, Optional, Union

from .config import CODEC_CONFIG
from .convert import NativeConverter
from .errors import DecodeError, DepthExceededError, JSONSyntaxError
from .json_util import LiteralError, loads, locate_literal
from .models import NumberToken, Value, fits_int64

LOGGER = logging.getLogger("tablejson.decoder")
LOGGER.addHandler(logging.NullHandler())

_INT_LITERAL = re.compile(r"-?(?:0|[1-9][0-9]*)")


def classify_number(literal: str) -> Union[int, float]:
    """Integer when *literal* has no fraction/exponent and fits 64 bits."""
    if _INT_LITERAL.fullmatch(literal):
        n = int(literal)
        if fits_int64(n):
            return n
    f = float(literal)
    if math.isinf(f):
        raise JSONSyntaxError(f"number literal out of range: {literal}")
    return f


class _JSONTreeConverter(NativeConverter):
    def convert_scalar(self, obj: Any) -> Value:
        if isinstance(obj, NumberToken):
            return classify_number(obj)
        return super().convert_scalar(obj)


class TableDecoder:
    def __init__(self, max_depth: Optional[int] = None, config: Optional[Dict[str, Any]] = None):
        self.config = config or CODEC_CONFIG
        self.max_depth = max_depth if max_depth is not None else self.config["max_depth"]

    def decode(self, text: Union[str, bytes]) -> Value:
        try:
            tree = self._parse(text)
            return _JSONTreeConverter(max_depth=self.max_depth).convert(tree)
        except DecodeError as e:
            LOGGER.debug("decode failed: %s", e)
            raise

    def _parse(self, text: Union[str, bytes]) -> Any:
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("utf-8")
            except UnicodeDecodeError as e:
                raise JSONSyntaxError(f"input is not valid UTF-8: {e.reason}", e.start) from e
        try:
            return loads(text)
        except json.JSONDecodeError as e:
            raise JSONSyntaxError(e.msg, e.pos, e.lineno, e.colno) from e
        except RecursionError:
            raise DepthExceededError(self.max_depth) from None
        except LiteralError as e:
            # NaN / Infinity / 범위 초과 숫자 → 원문에서 위치 복원
            located = json.JSONDecodeError(e.msg, text, locate_literal(text, e.literal))
            raise JSONSyntaxError(located.msg, located.pos, located.lineno, located.colno) from e


_DEFAULT = TableDecoder()


def decode(text: Union[str, bytes]) -> Value:
    """Decode *text* with the default configuration."""
    return _DEFAULT.decode(text)
