from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies:
1. Defaults and target path normalization.
2. Depth window checks (negative values, min > max, unbounded max).
3. Type checks on flags and depths.
"""

import os
from pathlib import Path

import pytest

from foldernuker.core.services.validator import validate_config
from foldernuker.domain.config import ScanConfig


def test_defaults_fill_missing_keys(tmp_path: Path) -> None:
    cfg = validate_config({"target_path": str(tmp_path)})

    assert cfg == ScanConfig(target_path=str(tmp_path))
    assert cfg.max_depth is None


def test_relative_target_is_made_absolute(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "work").mkdir()
    monkeypatch.chdir(tmp_path)

    cfg = validate_config({"target_path": "work"})

    assert cfg.target_path == os.path.join(os.getcwd(), "work")


def test_missing_target_is_rejected() -> None:
    with pytest.raises(ValueError, match="not specified"):
        validate_config({"target_path": ""})


def test_nonexistent_target_names_the_path(tmp_path: Path) -> None:
    missing = tmp_path / "nope"
    with pytest.raises(ValueError, match="does not exist") as exc:
        validate_config({"target_path": str(missing)})
    assert str(missing) in str(exc.value)


def test_file_target_is_rejected(tmp_path: Path) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError, match="not a directory"):
        validate_config({"target_path": str(f)})


def test_min_greater_than_max_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="cannot be greater"):
        validate_config({"target_path": str(tmp_path), "min_depth": 3, "max_depth": 2})


def test_equal_bounds_are_accepted(tmp_path: Path) -> None:
    cfg = validate_config({"target_path": str(tmp_path), "min_depth": 2, "max_depth": 2})
    assert (cfg.min_depth, cfg.max_depth) == (2, 2)


@pytest.mark.parametrize("field", ["min_depth", "max_depth"])
def test_negative_depth_is_rejected(tmp_path: Path, field: str) -> None:
    with pytest.raises(ValueError, match="negative"):
        validate_config({"target_path": str(tmp_path), field: -1})


def test_wrong_types_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        validate_config({"target_path": str(tmp_path), "dry_run": "yes"})
    with pytest.raises(TypeError):
        validate_config({"target_path": str(tmp_path), "max_depth": "3"})
    with pytest.raises(TypeError):
        validate_config({"target_path": str(tmp_path), "min_depth": True})


def test_non_dict_config_is_rejected() -> None:
    with pytest.raises(TypeError):
        validate_config(["not", "a", "dict"])
