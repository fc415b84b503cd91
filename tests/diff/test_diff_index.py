"""Tests for build_diff_index()."""

from __future__ import annotations

import pytest

from json_path_db.diff.index import build_diff_index
from json_path_db.errors import InvalidInputError


class TestBuildDiffIndex:
    def test_maps_path_to_value(self) -> None:
        assert build_diff_index({"a": [1, 2], "b": {"c": None}}) == {
            ("a", 0): 1,
            ("a", 1): 2,
            ("b", "c"): None,
        }

    def test_structural_path_keys(self) -> None:
        """A freshly built tuple finds the entry; no identity involved."""
        index = build_diff_index([{"name": "George"}])
        assert index[tuple([0, "name"])] == "George"

    def test_same_content_same_index(self) -> None:
        assert build_diff_index({"x": [1]}) == build_diff_index({"x": [1]})

    def test_list_and_tuple_index_alike(self) -> None:
        assert build_diff_index({"x": [1, 2]}) == build_diff_index({"x": (1, 2)})

    def test_empty(self) -> None:
        assert build_diff_index({}) == {}
        assert build_diff_index([]) == {}

    def test_scalar_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            build_diff_index("not a container")
