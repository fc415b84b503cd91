"""Tests for PathEnumerator.

Covers flat and nested maps and sequences, empty-container pruning,
traversal order, leaf counting, path uniqueness, lookup consistency,
and InvalidInputError for scalar roots.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_path_db.errors import InvalidInputError
from json_path_db.paths.enumerator import PathEnumerator
from json_path_db.paths.lookup import lookup
from json_path_db.paths.nodes import NodeKind, classify

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def enumerator() -> PathEnumerator:
    """A fresh PathEnumerator instance for each test."""
    return PathEnumerator()


NESTED_DOCS: list[Any] = [
    {"a": [1, 2]},
    [{"name": "George", "age": 3}, {"name": "Francis", "age": 8}],
    {"user": {"name": "John", "tags": ["x", "y"], "meta": {}}},
    {"a": {"b": {"c": {"d": None}}}},
    [[], [[]], {}, [{"k": False}]],
    {"mixed": [1, "two", 3.0, None, True, {"deep": [0]}]},
]


def _count_leaves(node: Any) -> int:
    kind = classify(node)
    if kind is NodeKind.KEYED_MAP:
        return sum(_count_leaves(child) for child in node.values())
    if kind is NodeKind.SEQUENCE:
        return sum(_count_leaves(child) for child in node)
    return 1


# ---------------------------------------------------------------------------
# Basic enumeration
# ---------------------------------------------------------------------------


class TestEnumerate:
    def test_map_with_list(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate({"a": [1, 2]}) == [("a", 0), ("a", 1)]

    def test_flat_map(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate({"x": 1, "y": 2}) == [("x",), ("y",)]

    def test_flat_list(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate(["a", "b", "c"]) == [(0,), (1,), (2,)]

    def test_list_of_records(self, enumerator: PathEnumerator) -> None:
        doc = [{"name": "George", "age": 3}, {"name": "Francis", "age": 8}]
        assert enumerator.enumerate(doc) == [
            (0, "name"),
            (0, "age"),
            (1, "name"),
            (1, "age"),
        ]

    def test_tuple_is_a_sequence(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate({"p": (10, 20)}) == [("p", 0), ("p", 1)]

    def test_string_leaf_is_not_descended(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate({"s": "hello"}) == [("s",)]

    def test_none_leaf_produces_a_path(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate({"n": None}) == [("n",)]

    def test_non_string_keys_kept_as_is(self, enumerator: PathEnumerator) -> None:
        assert enumerator.enumerate({1: "a", (2, 3): "b"}) == [(1,), ((2, 3),)]

    def test_traversal_follows_insertion_order(
        self, enumerator: PathEnumerator
    ) -> None:
        assert enumerator.enumerate({"z": 1, "a": 2, "m": 3}) == [
            ("z",),
            ("a",),
            ("m",),
        ]


# ---------------------------------------------------------------------------
# Empty containers
# ---------------------------------------------------------------------------


class TestEmptyContainers:
    @pytest.mark.parametrize("root", [{}, [], ()])
    def test_empty_root_has_no_paths(
        self, enumerator: PathEnumerator, root: Any
    ) -> None:
        assert enumerator.enumerate(root) == []

    def test_empty_branches_are_pruned(self, enumerator: PathEnumerator) -> None:
        doc = {"keep": 1, "empty_map": {}, "empty_list": [], "nested": {"e": []}}
        assert enumerator.enumerate(doc) == [("keep",)]


# ---------------------------------------------------------------------------
# Properties over a small corpus
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize("doc", NESTED_DOCS)
    def test_path_count_equals_leaf_count(
        self, enumerator: PathEnumerator, doc: Any
    ) -> None:
        assert len(enumerator.enumerate(doc)) == _count_leaves(doc)

    @pytest.mark.parametrize("doc", NESTED_DOCS)
    def test_paths_are_distinct(self, enumerator: PathEnumerator, doc: Any) -> None:
        paths = enumerator.enumerate(doc)
        assert len(paths) == len(set(paths))

    @pytest.mark.parametrize("doc", NESTED_DOCS)
    def test_every_path_resolves_to_a_scalar(
        self, enumerator: PathEnumerator, doc: Any
    ) -> None:
        for path in enumerator.enumerate(doc):
            assert classify(lookup(doc, path)) is NodeKind.SCALAR

    @pytest.mark.parametrize("doc", NESTED_DOCS)
    def test_walk_values_match_lookup(
        self, enumerator: PathEnumerator, doc: Any
    ) -> None:
        for path, value in enumerator.walk(doc):
            assert lookup(doc, path) is value


# ---------------------------------------------------------------------------
# Invalid input
# ---------------------------------------------------------------------------


class TestInvalidInput:
    @pytest.mark.parametrize("root", [5, "text", None, 1.5, True, b"raw"])
    def test_scalar_root_raises(self, enumerator: PathEnumerator, root: Any) -> None:
        with pytest.raises(InvalidInputError):
            enumerator.enumerate(root)

    def test_walk_raises_before_iteration(self, enumerator: PathEnumerator) -> None:
        with pytest.raises(InvalidInputError):
            enumerator.walk(5)

    def test_invalid_input_is_a_type_error(self, enumerator: PathEnumerator) -> None:
        with pytest.raises(TypeError, match=r"mapping or a sequence"):
            enumerator.enumerate(5)

    def test_error_keeps_the_value(self, enumerator: PathEnumerator) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            enumerator.enumerate(5)
        assert exc_info.value.value == 5
