"""tablejson - host-runtime table values ↔ JSON text."""

__version__ = "0.1.0"

from .models import NumberToken, Table
from .classifier import Shape, classify
from .encoder import TableEncoder, encode
from .decoder import TableDecoder, classify_number, decode
from .convert import NativeConverter, from_native, to_native
from .errors import (
    TableJSONError,
    EncodeError,
    DecodeError,
    SparseArrayError,
    InvalidKeyTypeError,
    CyclicReferenceError,
    InvalidStringError,
    InvalidNumberError,
    InvalidValueError,
    JSONSyntaxError,
    DepthExceededError,
)
from .module import ArgumentError, HostModule, loader, preload

__all__ = [
    "NumberToken",
    "Table",
    "Shape",
    "classify",
    "TableEncoder",
    "encode",
    "TableDecoder",
    "classify_number",
    "decode",
    "NativeConverter",
    "from_native",
    "to_native",
    "TableJSONError",
    "EncodeError",
    "DecodeError",
    "SparseArrayError",
    "InvalidKeyTypeError",
    "CyclicReferenceError",
    "InvalidStringError",
    "InvalidNumberError",
    "InvalidValueError",
    "JSONSyntaxError",
    "DepthExceededError",
    "ArgumentError",
    "HostModule",
    "loader",
    "preload",
]
