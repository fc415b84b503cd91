"""DiffConfig: immutable options controlling how leaf values are compared."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the diff engine.

    Attributes:
        null_equals_missing: When True, a ``None`` leaf is treated as
            equivalent to a path that is absent on the other side.
            Default False.
        strict_types: When True, two leaves are equal only if they also have
            exactly the same type, so ``1``, ``1.0`` and ``True`` all differ.
            Default False (plain ``==``).
    """

    null_equals_missing: bool = False
    strict_types: bool = False

    def __post_init__(self) -> None:
        for name in ("null_equals_missing", "strict_types"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a bool, got {type(value).__name__}"
                raise ValueError(msg)
