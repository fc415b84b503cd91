"""Total order over path keys and paths.

Python refuses to compare ``1 < "a"``, so sorting paths that mix key kinds
at the same position needs an explicit rule. Keys are ordered first by a
fixed type rank, then by value within the rank:

    0  None
    1  bool                                 False < True
    2  int, float, Decimal, Fraction        numeric, NaN after every number
    3  str                                  code point order
    4  bytes                                byte order
    5  tuple                                recursively, like a path
    6  frozenset                            sorted members, compared like a path
    7  anything else                        qualified type name, then ``<``

All integer indices therefore sort before all string keys. Paths compare
element by element; a proper prefix sorts before any longer path.

Rank 7 relies on the type's own ``<``. Two unequal keys it cannot order,
either because ``<`` raises ``TypeError`` or because neither ``a < b`` nor
``b < a`` holds, raise ``IncomparableKeyError`` instead of tying.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from typing import Any

from json_path_db.errors import IncomparableKeyError
from json_path_db.paths.nodes import Key, Path

__all__ = ["compare_keys", "compare_paths", "key_rank", "path_sort_key"]

_NUMBER_TYPES = (int, float, Decimal, Fraction)

_RANK_NONE = 0
_RANK_BOOL = 1
_RANK_NUMBER = 2
_RANK_STR = 3
_RANK_BYTES = 4
_RANK_TUPLE = 5
_RANK_FROZENSET = 6
_RANK_OTHER = 7


def key_rank(key: Key) -> int:
    """Return the type rank of ``key`` (see module docstring)."""
    if key is None:
        return _RANK_NONE
    # bool before int: isinstance(True, int) is True
    if isinstance(key, bool):
        return _RANK_BOOL
    if isinstance(key, _NUMBER_TYPES):
        return _RANK_NUMBER
    if isinstance(key, str):
        return _RANK_STR
    if isinstance(key, bytes):
        return _RANK_BYTES
    if isinstance(key, tuple):
        return _RANK_TUPLE
    if isinstance(key, frozenset):
        return _RANK_FROZENSET
    return _RANK_OTHER


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_keys(left: Key, right: Key) -> int:
    """Three-way compare two keys under the total key order.

    Returns:
        Negative if ``left`` sorts first, positive if ``right`` does, else 0.
        Zero only for keys that are equal (or both NaN).

    Raises:
        IncomparableKeyError: If two rank-7 keys of the same type cannot be
            ordered by their native comparison.
    """
    left_rank = key_rank(left)
    right_rank = key_rank(right)
    if left_rank != right_rank:
        return left_rank - right_rank

    if left_rank == _RANK_NONE:
        return 0
    if left_rank == _RANK_NUMBER:
        return _compare_numbers(left, right)
    if left_rank == _RANK_TUPLE:
        return compare_paths(left, right)
    if left_rank == _RANK_FROZENSET:
        return compare_paths(_sorted_members(left), _sorted_members(right))
    if left_rank == _RANK_OTHER:
        left_name = _qualified_name(left)
        right_name = _qualified_name(right)
        if left_name != right_name:
            return _sign(left_name, right_name)

    try:
        result = _sign(left, right)
    except TypeError:
        raise IncomparableKeyError(left, right) from None
    # a partial order (e.g. subset) ties on unequal keys
    if result == 0 and left != right:
        raise IncomparableKeyError(left, right)
    return result


def compare_paths(left: Path, right: Path) -> int:
    """Three-way compare two paths lexicographically under ``compare_keys``."""
    for left_key, right_key in zip(left, right):
        result = compare_keys(left_key, right_key)
        if result:
            return result
    return len(left) - len(right)


path_sort_key: Callable[[Path], Any] = functools.cmp_to_key(compare_paths)
_key_sort_key: Callable[[Key], Any] = functools.cmp_to_key(compare_keys)


def _compare_numbers(left: Any, right: Any) -> int:
    left_nan = _is_nan(left)
    right_nan = _is_nan(right)
    if left_nan or right_nan:
        return left_nan - right_nan
    try:
        return _sign(left, right)
    except TypeError:
        raise IncomparableKeyError(left, right) from None


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _sorted_members(value: frozenset[Any]) -> tuple[Any, ...]:
    return tuple(sorted(value, key=_key_sort_key))


def _qualified_name(value: Any) -> str:
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"
