"""pytest plugin providing the assert_same_structure fixture.

Registered through the pytest11 entry point in pyproject.toml, so any test
suite in an environment where json-path-db is installed can request the
fixture by name. Failures list every differing leaf path with the actual and
expected values, in the same path order diff() returns.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_path_db import SAME, DiffConfig, diff


@pytest.fixture(scope="session")
def assert_same_structure() -> Any:
    """Fixture that returns a callable leaf-by-leaf structure asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh DiffEngine per call).

    Usage in tests::

        def test_payload(assert_same_structure):
            assert_same_structure({"a": [1, 2]}, {"a": [1, 2]})

        def test_changed(assert_same_structure):
            with pytest.raises(AssertionError, match=r"differ at 1 path"):
                assert_same_structure({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when any leaf path differs.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two nested structures have identical leaves.

        Raises:
            AssertionError: When ``diff(actual, expected)`` is not ``SAME``,
                with one line per differing path showing both sides.
        """
        result = diff(actual, expected, config=config)
        if result is SAME:
            return
        lines = [
            f"  {list(record.path)!r}: actual={record.a!r} expected={record.b!r}"
            for record in result
        ]
        noun = "path" if len(result) == 1 else "paths"
        raise AssertionError(
            f"Structures differ at {len(result)} {noun}:\n" + "\n".join(lines)
        )

    return _assert
