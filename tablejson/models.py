"""Value model shared by the encoder and the decoder.

A *Value* is one of ``None`` (nil), ``bool``, ``int`` (64-bit), ``float``,
``str`` / ``bytes`` (UTF-8 string) or :class:`Table`.  The table is the host
runtime's single composite type: any key type the host allows may appear,
which is why the encoder has to classify it before serializing.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

Key = Union[bool, int, float, str, bytes, "Table"]
Value = Union[None, bool, int, float, str, bytes, "Table"]


class NumberToken(str):
    """Exact text of a JSON number literal, not yet typed as int/float."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"NumberToken({str.__repr__(self)})"


def fits_int64(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX


# ──────────────────────────────────────────────────────────────
# key normalisation
# ──────────────────────────────────────────────────────────────
def normalize_key(key: Any) -> Key:
    """Return the canonical form of *key* as the host table stores it.

    * integral floats inside the 64-bit range collapse onto the int key
    * UTF-8 ``bytes`` collapse onto the ``str`` key
    * ``None`` and NaN are not valid keys
    """
    if key is None:
        raise TypeError("table index is nil")
    if isinstance(key, bool):
        return key
    if isinstance(key, float):
        if math.isnan(key):
            raise ValueError("table index is NaN")
        if key.is_integer() and fits_int64(int(key)):
            return int(key)
        return key
    if isinstance(key, (int, str, Table)):
        return key
    if isinstance(key, bytes):
        try:
            return key.decode("utf-8")
        except UnicodeDecodeError:
            return key
    raise TypeError(f"invalid table key type: {type(key).__name__}")


def _slot(key: Key) -> Any:
    # bool 은 int 와 hash 가 같으므로 별도 slot 으로 분리
    if isinstance(key, bool):
        return (bool, key)
    return key


# ──────────────────────────────────────────────────────────────
# Table
# ──────────────────────────────────────────────────────────────
class Table:
    """Ordered key → value association with host-table semantics.

    Equality and hashing are by identity, like the host runtime's tables;
    compare contents with :func:`tablejson.convert.to_native` instead.
    """

    __slots__ = ("_entries", "__weakref__")

    def __init__(self, entries: Optional[Iterable[Tuple[Any, Value]]] = None):
        self._entries: Dict[Any, Tuple[Key, Value]] = {}
        if entries is not None:
            for k, v in entries:
                self[k] = v

    @classmethod
    def from_list(cls, values: Iterable[Value]) -> "Table":
        """Array-style constructor: keys ``1..N`` in iteration order."""
        return cls((i, v) for i, v in enumerate(values, start=1))

    @classmethod
    def from_dict(cls, mapping: Mapping[Any, Value]) -> "Table":
        return cls(mapping.items())

    # ------------------------------------------------------------------
    def __getitem__(self, key: Any) -> Value:
        entry = self._entries.get(_slot(normalize_key(key)))
        return None if entry is None else entry[1]

    def __setitem__(self, key: Any, value: Value) -> None:
        nkey = normalize_key(key)
        slot = _slot(nkey)
        if value is None:
            self._entries.pop(slot, None)
        else:
            self._entries[slot] = (nkey, value)

    def __delitem__(self, key: Any) -> None:
        self[key] = None

    def __contains__(self, key: Any) -> bool:
        return _slot(normalize_key(key)) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Key]:
        return self.keys()

    def __repr__(self) -> str:
        return f"<Table at {id(self):#x} with {len(self)} entries>"

    # ------------------------------------------------------------------
    def keys(self) -> Iterator[Key]:
        return (k for k, _ in self._entries.values())

    def values(self) -> Iterator[Value]:
        return (v for _, v in self._entries.values())

    def items(self) -> Iterator[Tuple[Key, Value]]:
        return iter(list(self._entries.values()))

    def get(self, key: Any, default: Value = None) -> Value:
        value = self[key]
        return default if value is None else value

    def append(self, value: Value) -> None:
        """Store *value* at ``len + 1`` (array-style push)."""
        self[len(self) + 1] = value
