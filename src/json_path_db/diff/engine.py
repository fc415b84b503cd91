"""DiffEngine: structural diff of two nested structures via path indexes.

Both structures are flattened to DiffIndexes (path -> leaf value). The
difference is then a per-path comparison over the union of both key sets:

- path only on the left   -> DiffRecord(path, value, ABSENT)
- path only on the right  -> DiffRecord(path, ABSENT, value)
- path on both, unequal   -> DiffRecord(path, left_value, right_value)

Records are sorted by path under the total order in
``json_path_db.paths.ordering``. When nothing differs the engine returns the
``SAME`` sentinel instead of an empty list.
"""

from __future__ import annotations

import logging
from typing import Any

from json_path_db.diff.config import DiffConfig
from json_path_db.diff.index import DiffIndex, build_diff_index
from json_path_db.paths.ordering import path_sort_key
from json_path_db.result import ABSENT, SAME, DiffRecord

__all__ = ["DiffEngine"]

logger = logging.getLogger(__name__)


class DiffEngine:
    """Compares two nested structures leaf by leaf.

    Leaf values are equal when they are the same object or compare ``==``;
    the identity check keeps a NaN leaf equal to itself, so
    ``diff(s, s)`` is always ``SAME``. ``DiffConfig`` can tighten equality
    (``strict_types``) or loosen it (``null_equals_missing``).

    Example::

        engine = DiffEngine()
        engine.diff({"foo": 1}, {"foo": 9000, "bar": 9000})
        # [DiffRecord(path=("bar",), a=ABSENT, b=9000),
        #  DiffRecord(path=("foo",), a=1, b=9000)]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, a: Any, b: Any) -> Any:
        """Return ``SAME`` or the path-sorted list of DiffRecords.

        Raises:
            InvalidInputError: If ``a`` or ``b`` is a scalar.
            IncomparableKeyError: If two differing paths hold keys that have
                no defined relative order.
        """
        index_a = build_diff_index(a)
        index_b = build_diff_index(b)

        # Fast path; only valid when equality is plain ==
        if not self._config.strict_types and index_a == index_b:
            logger.debug("indexes equal (%d paths)", len(index_a))
            return SAME

        records = self.diff_indexes(index_a, index_b)
        if not records:
            return SAME
        logger.debug(
            "%d differing paths out of %d/%d",
            len(records),
            len(index_a),
            len(index_b),
        )
        return records

    def diff_indexes(self, index_a: DiffIndex, index_b: DiffIndex) -> list[DiffRecord]:
        """Return the sorted DiffRecords between two prebuilt indexes.

        Unlike ``diff``, an empty list (not ``SAME``) means no differences.
        """
        records = []
        for path in index_a.keys() | index_b.keys():
            va = index_a.get(path, ABSENT)
            vb = index_b.get(path, ABSENT)
            if not self._values_equal(va, vb):
                records.append(DiffRecord(path=path, a=va, b=vb))
        records.sort(key=lambda record: path_sort_key(record.path))
        return records

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _values_equal(self, va: Any, vb: Any) -> bool:
        if self._config.null_equals_missing:
            va = ABSENT if va is None else va
            vb = ABSENT if vb is None else vb
        if va is vb:
            return True
        if va is ABSENT or vb is ABSENT:
            return False
        if self._config.strict_types and type(va) is not type(vb):
            return False
        return bool(va == vb)
