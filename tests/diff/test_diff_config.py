"""Tests for DiffConfig frozen dataclass."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_path_db.diff.config import DiffConfig


class TestDiffConfig:
    def test_defaults(self) -> None:
        config = DiffConfig()
        assert config.null_equals_missing is False
        assert config.strict_types is False

    def test_custom_values(self) -> None:
        config = DiffConfig(null_equals_missing=True, strict_types=True)
        assert config.null_equals_missing is True
        assert config.strict_types is True

    def test_frozen(self) -> None:
        config = DiffConfig()
        with pytest.raises(FrozenInstanceError):
            config.strict_types = True  # type: ignore[misc]

    @pytest.mark.parametrize("field_name", ["null_equals_missing", "strict_types"])
    def test_non_bool_rejected(self, field_name: str) -> None:
        with pytest.raises(ValueError, match=field_name):
            DiffConfig(**{field_name: 1})  # type: ignore[arg-type]

    def test_equality(self) -> None:
        assert DiffConfig(strict_types=True) == DiffConfig(strict_types=True)
        assert DiffConfig() != DiffConfig(null_equals_missing=True)
