"""Public API functions for json-path-db.

This module provides the user-facing functions: enumerate_paths, make_db,
build_diff_index, diff, is_same and lookup. Each call creates fresh
components to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_path_db.db.formatter import Database, TupleFormatter, TupleMode
from json_path_db.diff.config import DiffConfig
from json_path_db.diff.engine import DiffEngine
from json_path_db.diff.index import build_diff_index
from json_path_db.paths.enumerator import PathEnumerator
from json_path_db.paths.lookup import lookup
from json_path_db.paths.nodes import Path
from json_path_db.result import SAME

__all__ = [
    "build_diff_index",
    "diff",
    "enumerate_paths",
    "is_same",
    "lookup",
    "make_db",
]


def enumerate_paths(root: Any) -> list[Path]:
    """Return the path of every scalar leaf under ``root``.

    Args:
        root: A mapping or a (non-string) sequence, nested arbitrarily.

    Returns:
        Distinct paths (tuples of keys and indices) in traversal order.
        Empty containers contribute nothing.

    Raises:
        InvalidInputError: If ``root`` is a scalar.
    """
    return PathEnumerator().enumerate(root)


def make_db(root: Any, mode: TupleMode | str = TupleMode.PLAIN) -> Database:
    """Flatten ``root`` into a list of relation rows.

    Args:
        root: A mapping or a (non-string) sequence.
        mode: Row shape, ``TupleMode.PLAIN`` by default. Accepts the string
              values ``"plain"``, ``"diff"`` and ``"update"``.

    Returns:
        One row per leaf, in the order ``enumerate_paths`` yields the paths.

    Raises:
        InvalidInputError: If ``root`` is a scalar.
        ValueError: If ``mode`` is not a known TupleMode.
    """
    return TupleFormatter(mode).format(root)


def diff(a: Any, b: Any, config: DiffConfig | None = None) -> Any:
    """Return the structural differences between ``a`` and ``b``.

    Args:
        a:      Left structure (mapping or sequence).
        b:      Right structure.
        config: Value-equality options. Defaults to ``DiffConfig()`` when None.

    Returns:
        ``SAME`` when no leaf differs, otherwise a list of ``DiffRecord``
        sorted by path. A side where the path does not exist is ``ABSENT``.
    """
    return DiffEngine(config=config).diff(a, b)


def is_same(a: Any, b: Any, config: DiffConfig | None = None) -> bool:
    """Return True if ``diff(a, b, config)`` finds no differences."""
    return diff(a, b, config=config) is SAME
