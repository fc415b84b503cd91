"""TupleMode StrEnum and TupleFormatter: turn leaf paths into relation rows.

A Database is the list of rows for one structure, in traversal order. The
row shape depends on the mode:

    PLAIN   (k1, ..., kn, value)          direct relational queries
    DIFF    (path, value)                 path -> value indexing
    UPDATE  (path, k1, ..., kn, value)    queries that bind the whole path too

The UPDATE shape repeats the path both as one opaque column and spread out.
Downstream queries bind the whole path as a single variable, so the
redundancy is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, TypeAlias

from json_path_db.paths.enumerator import PathEnumerator
from json_path_db.paths.nodes import Path

__all__ = ["Database", "Row", "TupleFormatter", "TupleMode"]

logger = logging.getLogger(__name__)

Row: TypeAlias = tuple[Any, ...]
Database: TypeAlias = list[Row]


class TupleMode(StrEnum):
    """Row shape produced by TupleFormatter.

    - PLAIN:  path components spread as leading columns, then the value.
    - DIFF:   the whole path as one column, then the value.
    - UPDATE: the whole path, then the spread components, then the value.
    """

    PLAIN = auto()
    DIFF = auto()
    UPDATE = auto()


@dataclass(frozen=True, slots=True)
class TupleFormatter:
    """Builds the Database for a root structure in one TupleMode.

    ``mode`` accepts a TupleMode or its string value (``"plain"``,
    ``"diff"``, ``"update"``).

    Example::
        TupleFormatter(TupleMode.UPDATE).format([{"age": 3}])
        # [((0, "age"), 0, "age", 3)]
    """

    mode: TupleMode = TupleMode.PLAIN
    enumerator: PathEnumerator = field(default_factory=PathEnumerator)

    def __post_init__(self) -> None:
        # raises ValueError for an unknown mode string
        object.__setattr__(self, "mode", TupleMode(self.mode))

    def format(self, root: Any) -> Database:
        """Return one row per leaf of ``root``, in traversal order.

        Raises:
            InvalidInputError: If ``root`` is a scalar.
        """
        db = [self.make_row(path, value) for path, value in self.enumerator.walk(root)]
        logger.debug("built %d %s rows", len(db), self.mode)
        return db

    def make_row(self, path: Path, value: Any) -> Row:
        """Return the row for one leaf, shaped by ``self.mode``."""
        if self.mode is TupleMode.PLAIN:
            return (*path, value)
        if self.mode is TupleMode.DIFF:
            return (path, value)
        return (path, *path, value)
