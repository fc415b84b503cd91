"""Exception hierarchy for json-path-db.

Every error raised on purpose by this package derives from ``JsonPathDbError``
and also from the built-in exception a caller would naturally expect
(``TypeError`` for bad input shapes, ``LookupError`` for unresolvable paths),
so existing ``except TypeError`` handlers keep working.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "IncomparableKeyError",
    "InvalidInputError",
    "JsonPathDbError",
    "PathNotFoundError",
]


class JsonPathDbError(Exception):
    """Base class for all json-path-db errors."""


class InvalidInputError(JsonPathDbError, TypeError):
    """The top-level value is not a keyed map or a sequence.

    Only raised for the root of a traversal. Scalars found *inside* a
    container terminate a path and are never an error.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Expected a mapping or a sequence at the top level, "
            f"got {type(value).__name__}: {value!r}"
        )


class IncomparableKeyError(JsonPathDbError, TypeError):
    """Two path keys have no defined relative order."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot order path keys {left!r} ({type(left).__qualname__}) "
            f"and {right!r} ({type(right).__qualname__})"
        )


class PathNotFoundError(JsonPathDbError, LookupError):
    """A path does not resolve inside the given structure.

    Attributes:
        path:     The full path that was looked up.
        position: Index into ``path`` of the key that failed to resolve.
    """

    def __init__(self, path: tuple[Any, ...], position: int, reason: str) -> None:
        self.path = path
        self.position = position
        super().__init__(
            f"Path {path!r} does not resolve at position {position} "
            f"(key {path[position]!r}): {reason}"
        )
