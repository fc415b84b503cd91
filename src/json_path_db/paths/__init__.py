"""Paths subpackage: traversal primitives over nested structures.

Re-exports the public API for the paths module:
- NodeKind / classify: the closed KEYED_MAP | SEQUENCE | SCALAR variant
- PathEnumerator: depth-first enumeration of every leaf path
- lookup: structural resolution of a path
- compare_keys / compare_paths / path_sort_key: the total order over paths
"""

from json_path_db.paths.enumerator import PathEnumerator
from json_path_db.paths.lookup import lookup
from json_path_db.paths.nodes import Key, NodeKind, Path, classify, is_container
from json_path_db.paths.ordering import (
    compare_keys,
    compare_paths,
    key_rank,
    path_sort_key,
)

__all__ = [
    "Key",
    "NodeKind",
    "Path",
    "PathEnumerator",
    "classify",
    "compare_keys",
    "compare_paths",
    "is_container",
    "key_rank",
    "lookup",
    "path_sort_key",
]
