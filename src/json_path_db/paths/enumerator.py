"""PathEnumerator: depth-first discovery of every leaf path in a nested structure.

Paths are tuples of keys built during traversal:
- The root is ``()``.
- A mapping level appends the key, a sequence level appends the 0-based index.

Only leaves produce paths. Empty containers produce nothing, so a branch that
holds no scalar anywhere below it does not appear in the output at all.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from json_path_db.errors import InvalidInputError
from json_path_db.paths.nodes import NodeKind, Path, classify, is_container

__all__ = ["PathEnumerator"]


@dataclass
class PathEnumerator:
    """Enumerates the path of every scalar leaf under a container root.

    Traversal order is the iteration order of each container: insertion
    order for dicts, position order for sequences. No node is visited twice.
    There is no cycle detection; a self-referencing structure recurses until
    the interpreter's recursion limit is hit.

    Example::
        enumerator = PathEnumerator()
        enumerator.enumerate({"a": [1, 2], "b": {}})
        # [("a", 0), ("a", 1)]
    """

    def enumerate(self, root: Any) -> list[Path]:
        """Return the path of every leaf under ``root``.

        Args:
            root: A mapping or a (non-string) sequence.

        Returns:
            List of distinct paths in traversal order.

        Raises:
            InvalidInputError: If ``root`` is a scalar.
        """
        return [path for path, _ in self.walk(root)]

    def walk(self, root: Any) -> Iterator[tuple[Path, Any]]:
        """Yield ``(path, leaf_value)`` pairs under ``root`` in traversal order.

        The root is validated eagerly, before the first ``next()`` call.

        Raises:
            InvalidInputError: If ``root`` is a scalar.
        """
        if not is_container(root):
            raise InvalidInputError(root)
        return self._walk(root, ())

    def _walk(self, node: Any, prefix: Path) -> Iterator[tuple[Path, Any]]:
        kind = classify(node)

        if kind is NodeKind.KEYED_MAP:
            for key, child in node.items():
                yield from self._walk(child, (*prefix, key))
        elif kind is NodeKind.SEQUENCE:
            for index, child in enumerate(node):
                yield from self._walk(child, (*prefix, index))
        else:
            yield prefix, node
