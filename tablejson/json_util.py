"""Thin wrappers over the JSON backends.

* orjson formats string and float literals (escaping, shortest float repr)
* stdlib ``json`` parses text; number literals come back as NumberToken
"""
import json
import math
import re

import orjson

from .models import NumberToken

# string literals are matched whole so their contents are never mistaken for tokens
_TOKEN = re.compile(
    r'"(?:[^"\\]|\\.)*"|-?Infinity|NaN|-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?'
)


class LiteralError(ValueError):
    """A lexically valid literal the parser hooks refuse."""

    def __init__(self, msg: str, literal: str):
        super().__init__(msg)
        self.msg = msg
        self.literal = literal


def dump_literal(o) -> str:
    """Return the JSON literal for a single ``str`` or ``float``."""
    return orjson.dumps(o).decode()


def _reject_constant(name: str):
    raise LiteralError(f"invalid JSON literal {name!r}", name)


def _number_token(literal: str) -> NumberToken:
    if math.isinf(float(literal)):
        raise LiteralError(f"number literal out of range: {literal}", literal)
    return NumberToken(literal)


def loads(text):
    """Parse *text* into a generic tree, keeping number literals as text."""
    return json.loads(
        text,
        parse_int=_number_token,
        parse_float=_number_token,
        parse_constant=_reject_constant,
    )


def locate_literal(text: str, literal: str) -> int:
    """Offset of the first *literal* token in *text* outside string literals."""
    for m in _TOKEN.finditer(text):
        if m.group() == literal:
            return m.start()
    return max(text.find(literal), 0)


encode_backend = lambda: "orjson"
decode_backend = lambda: "json"
