"""DiffRecord dataclass and the ABSENT / SAME sentinels for diff output.

This module provides the result types returned by diff() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, Final

from json_path_db.paths.nodes import Path

__all__ = ["ABSENT", "SAME", "ChangeKind", "DiffRecord"]


class _Sentinel:
    """Named singleton marker. Falsy, and survives copy and pickle as itself."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return self._name


# A path missing from one side. Distinct from None, which is a real leaf value.
ABSENT: Final = _Sentinel("ABSENT")

# Returned by diff() when two structures have no differences.
SAME: Final = _Sentinel("SAME")


class ChangeKind(StrEnum):
    """How a path differs between the left (a) and right (b) structures.

    - ADDED   -> "added"   : path only in b
    - REMOVED -> "removed" : path only in a
    - CHANGED -> "changed" : path in both, with different values
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """One difference between two structures.

    Attributes:
        path: Leaf path at which the structures differ.
        a:    Value in the left structure, or ``ABSENT``.
        b:    Value in the right structure, or ``ABSENT``.
    """

    path: Path
    a: Any
    b: Any

    @property
    def kind(self) -> ChangeKind:
        if self.a is ABSENT:
            return ChangeKind.ADDED
        if self.b is ABSENT:
            return ChangeKind.REMOVED
        return ChangeKind.CHANGED

    def as_dict(self) -> dict[str, Any]:
        """Return a plain dict; absent sides are left out rather than set to None."""
        out: dict[str, Any] = {"path": list(self.path), "kind": str(self.kind)}
        if self.a is not ABSENT:
            out["a"] = self.a
        if self.b is not ABSENT:
            out["b"] = self.b
        return out
