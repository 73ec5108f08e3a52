"""
tests/test_encode_errors.py
───────────────────────────
1) sparse / mixed key shapes
2) cyclic tables
3) nesting depth guard
"""
import pytest

from tablejson import Table, TableEncoder, encode
from tablejson.errors import (
    CyclicReferenceError,
    DepthExceededError,
    EncodeError,
    InvalidKeyTypeError,
    SparseArrayError,
)


# ----------------------------- Helper ---------------------------------
def _nested(depth):
    t = Table.from_list([1])
    for _ in range(depth - 1):
        t = Table.from_list([t])
    return t


# ----------------------------------------------------------------------
def test_sparse_array():
    t = Table([(1, 1), (2, 2), (10, 3)])
    with pytest.raises(SparseArrayError, match="sparse array"):
        encode(t)


@pytest.mark.parametrize(
    "entries",
    [
        [(0, "a")],
        [(-1, "a"), (1, "b")],
        [(2, "b"), (3, "c")],
    ],
)
def test_sparse_variants(entries):
    with pytest.raises(SparseArrayError):
        encode(Table(entries))


def test_mixed_keys():
    t = Table([(1, 1), (2, 2), (3, 3), ("name", "Tim")])
    with pytest.raises(InvalidKeyTypeError, match="mixed or invalid key types"):
        encode(t)


def test_boolean_key():
    t = Table.from_dict({"name": "Tim", False: 123})
    with pytest.raises(InvalidKeyTypeError, match="mixed or invalid key types"):
        encode(t)


@pytest.mark.parametrize("key", [True, 1.5, Table()])
def test_invalid_key_types(key):
    with pytest.raises(InvalidKeyTypeError):
        encode(Table([(key, "x")]))


def test_fractional_float_among_int_keys():
    with pytest.raises(InvalidKeyTypeError):
        encode(Table([(1, "a"), (1.5, "b")]))


def test_nested_error_aborts_whole_encode():
    t = Table.from_dict({"ok": Table.from_list([1]), "bad": Table([(5, 1)])})
    with pytest.raises(SparseArrayError):
        encode(t)


def test_first_error_wins():
    t = Table.from_list([Table([(3, 1)]), Table([("a", 1), (1, 2)])])
    with pytest.raises(SparseArrayError):
        encode(t)


# ----------------------------------------------------------------------
def test_two_table_cycle():
    a, b = Table(), Table()
    a["b"] = b
    b["a"] = a
    with pytest.raises(CyclicReferenceError):
        encode(a)


def test_self_reference():
    t = Table.from_list([1])
    t[2] = t
    with pytest.raises(CyclicReferenceError, match="recursively nested"):
        encode(t)


def test_cycle_is_an_encode_error():
    obj = Table.from_dict({"abc": 123, "def": None})
    obj2 = Table.from_dict({"obj": obj})
    obj["obj2"] = obj2
    with pytest.raises(EncodeError):
        encode(obj)


# ----------------------------------------------------------------------
def test_depth_limit():
    enc = TableEncoder(max_depth=3)
    assert enc.encode(_nested(3)) == "[[[1]]]"
    with pytest.raises(DepthExceededError):
        enc.encode(_nested(4))


def test_default_depth_limit():
    with pytest.raises(DepthExceededError):
        encode(_nested(300))


def test_depth_error_is_both_encode_and_decode_error():
    from tablejson.errors import DecodeError

    assert issubclass(DepthExceededError, EncodeError)
    assert issubclass(DepthExceededError, DecodeError)
