"""json-path-db - flatten nested structures into path-indexed relation rows."""

from __future__ import annotations

from json_path_db.api import (
    build_diff_index,
    diff,
    enumerate_paths,
    is_same,
    lookup,
    make_db,
)
from json_path_db.db.formatter import TupleFormatter, TupleMode
from json_path_db.diff.config import DiffConfig
from json_path_db.diff.engine import DiffEngine
from json_path_db.errors import (
    IncomparableKeyError,
    InvalidInputError,
    JsonPathDbError,
    PathNotFoundError,
)
from json_path_db.paths.enumerator import PathEnumerator
from json_path_db.result import ABSENT, SAME, ChangeKind, DiffRecord

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "SAME",
    "ChangeKind",
    "DiffConfig",
    "DiffEngine",
    "DiffRecord",
    "IncomparableKeyError",
    "InvalidInputError",
    "JsonPathDbError",
    "PathEnumerator",
    "PathNotFoundError",
    "TupleFormatter",
    "TupleMode",
    "build_diff_index",
    "diff",
    "enumerate_paths",
    "is_same",
    "lookup",
    "make_db",
]
