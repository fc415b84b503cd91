"""DiffIndex: path -> leaf value mapping built from DIFF-mode rows."""

from __future__ import annotations

from typing import Any, TypeAlias

from json_path_db.db.formatter import TupleFormatter, TupleMode
from json_path_db.paths.nodes import Path

__all__ = ["DiffIndex", "build_diff_index"]

DiffIndex: TypeAlias = dict[Path, Any]

_formatter = TupleFormatter(TupleMode.DIFF)


def build_diff_index(root: Any) -> DiffIndex:
    """Index every leaf of ``root`` by its path.

    Each ``(path, value)`` row becomes one entry. Paths are tuples, so two
    paths with equal elements in the same order hash to the same entry.

    Raises:
        InvalidInputError: If ``root`` is a scalar.
    """
    return dict(_formatter.format(root))
