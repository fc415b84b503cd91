"""db subpackage: flattening nested structures into relation rows."""

from __future__ import annotations

from json_path_db.db.formatter import Database, Row, TupleFormatter, TupleMode

__all__ = ["Database", "Row", "TupleFormatter", "TupleMode"]
