"""Host-runtime call boundary for the ``json`` module.

The core raises typed exceptions; host scripts expect the runtime's
conventions instead:

* wrong arity or argument type → an error naming the function and argument
  position (``bad argument #1 to decode (...)``), raised as ArgumentError
* codec failure → the two-valued result ``(None, message)``
* success → ``(result, None)``

Expected argument shapes live in :data:`ENTRY_POINTS` so the core functions
stay free of host conventions.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, MutableMapping, Optional, Tuple

from .decoder import TableDecoder
from .encoder import TableEncoder
from .errors import TableJSONError
from .models import Table

LOGGER = logging.getLogger("tablejson.module")
LOGGER.addHandler(logging.NullHandler())

MODULE_NAME = "json"


class ArgumentError(TypeError):
    """Bad call from a host script (arity or argument type)."""


@dataclass(frozen=True)
class ArgSpec:
    name: str                      # function name as the host sees it
    expected: str                  # host type name used in diagnostics
    accepts: Tuple[type, ...]      # Python types admitted as argument #1


ENTRY_POINTS: Dict[str, ArgSpec] = {
    "encode": ArgSpec("encode", "value", (type(None), bool, int, float, str, bytes, Table)),
    "decode": ArgSpec("decode", "string", (str, bytes, bytearray)),
}


def host_type_name(v: Any) -> str:
    if v is None:
        return "nil"
    if isinstance(v, bool):
        return "boolean"
    if isinstance(v, (int, float)):
        return "number"
    if isinstance(v, (str, bytes, bytearray)):
        return "string"
    if isinstance(v, Table):
        return "table"
    if callable(v):
        return "function"
    return "userdata"


def check_args(entry: ArgSpec, args: Tuple[Any, ...]) -> Any:
    """Return the single argument of a call to *entry*, or raise ArgumentError."""
    if not args:
        raise ArgumentError(f"bad argument #1 to {entry.name} ({entry.expected} expected, got no value)")
    if len(args) > 1:
        raise ArgumentError(f"bad argument #1 to {entry.name} (expected 1 argument, got {len(args)})")
    arg = args[0]
    if not isinstance(arg, entry.accepts):
        raise ArgumentError(
            f"bad argument #1 to {entry.name} ({entry.expected} expected, got {host_type_name(arg)})"
        )
    return arg


# ──────────────────────────────────────────────────────────────
class HostModule:
    """The ``json`` module table exposed to host scripts."""

    def __init__(self, encoder: Optional[TableEncoder] = None, decoder: Optional[TableDecoder] = None):
        self.encoder = encoder or TableEncoder()
        self.decoder = decoder or TableDecoder()

    def encode(self, *args: Any) -> Tuple[Optional[str], Optional[str]]:
        value = check_args(ENTRY_POINTS["encode"], args)
        return _two_valued(self.encoder.encode, value)

    def decode(self, *args: Any) -> Tuple[Any, Optional[str]]:
        text = check_args(ENTRY_POINTS["decode"], args)
        return _two_valued(self.decoder.decode, text)

    def functions(self) -> Dict[str, Callable[..., Tuple[Any, Optional[str]]]]:
        return {"encode": self.encode, "decode": self.decode}


def _two_valued(fn: Callable[[Any], Any], arg: Any) -> Tuple[Any, Optional[str]]:
    try:
        return fn(arg), None
    except TableJSONError as e:
        LOGGER.debug("%s → (nil, %r)", e.kind, str(e))
        return None, str(e)


def loader() -> Dict[str, Callable[..., Tuple[Any, Optional[str]]]]:
    """Build the module table handed to the host on ``require``."""
    return HostModule().functions()


def preload(registry: MutableMapping[str, Callable[[], Any]], name: str = MODULE_NAME) -> None:
    """Register :func:`loader` under *name* in a host preload registry."""
    registry[name] = loader
