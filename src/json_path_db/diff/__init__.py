"""diff subpackage: public API for structural diffing.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_path_db.diff import DiffConfig, DiffEngine

    engine = DiffEngine(DiffConfig(null_equals_missing=True))
    engine.diff({"x": None}, {})
    # SAME
"""

from __future__ import annotations

from json_path_db.diff.config import DiffConfig
from json_path_db.diff.engine import DiffEngine
from json_path_db.diff.index import DiffIndex, build_diff_index

__all__ = ["DiffConfig", "DiffEngine", "DiffIndex", "build_diff_index"]
