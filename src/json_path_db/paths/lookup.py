"""Structural resolution of a path against a nested structure."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_path_db.errors import PathNotFoundError
from json_path_db.paths.nodes import Key, NodeKind, classify

__all__ = ["lookup"]


def lookup(root: Any, path: Iterable[Key]) -> Any:
    """Return the value found at ``path`` inside ``root``.

    Mapping steps use ``node[key]``. Sequence steps accept only non-negative
    ``int`` indices (``bool`` is rejected even though it subclasses ``int``),
    so negative indexing never aliases a real position.

    Args:
        root: Any nested structure. ``lookup(root, ())`` returns ``root``.
        path: Keys to follow from the root.

    Returns:
        The node at ``path``; a scalar for any path produced by enumeration.

    Raises:
        PathNotFoundError: If a key is missing, an index is out of range or
            not an index, or the walk tries to step into a scalar.
    """
    path = tuple(path)
    node = root
    for position, key in enumerate(path):
        kind = classify(node)
        if kind is NodeKind.KEYED_MAP:
            try:
                node = node[key]
            except KeyError:
                raise PathNotFoundError(path, position, "missing key") from None
            except TypeError:
                raise PathNotFoundError(path, position, "unhashable key") from None
        elif kind is NodeKind.SEQUENCE:
            if isinstance(key, bool) or not isinstance(key, int):
                raise PathNotFoundError(path, position, "sequence index must be int")
            if not 0 <= key < len(node):
                raise PathNotFoundError(path, position, "index out of range")
            node = node[key]
        else:
            raise PathNotFoundError(
                path, position, f"cannot step into {type(node).__name__}"
            )
    return node
