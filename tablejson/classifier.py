"""Shape classification of host tables.

The host runtime uses one composite type for arrays and maps, so every table
must be classified before it can be written as JSON.  All the key-type
policing lives here; the encoder only dispatches on the returned
:class:`Shape`.
"""
from __future__ import annotations

from enum import Enum
from typing import List

from .models import Table


class Shape(Enum):
    EMPTY = "empty"
    ARRAY = "array"
    OBJECT = "object"
    SPARSE = "sparse"
    MIXED = "mixed"


def _is_int_key(key) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def classify(table: Table) -> Shape:
    """Return the JSON shape of *table*.

    >>> classify(Table.from_list([1, 2, 3]))
    <Shape.ARRAY: 'array'>
    >>> classify(Table.from_dict({"name": "Tim"}))
    <Shape.OBJECT: 'object'>
    """
    n = len(table)
    if n == 0:
        return Shape.EMPTY

    keys = list(table.keys())
    if all(isinstance(k, (str, bytes)) for k in keys):
        return Shape.OBJECT
    if all(_is_int_key(k) for k in keys):
        # keys are unique, so N distinct ints all inside 1..N is exactly {1..N}
        if all(1 <= k <= n for k in keys):
            return Shape.ARRAY
        return Shape.SPARSE
    # str + int, bool, Table, non-integral float ...
    return Shape.MIXED


def array_values(table: Table) -> List:
    """Values of an ARRAY-shaped table in key order ``1..N``."""
    return [table[i] for i in range(1, len(table) + 1)]
