from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Depth window helpers, including the unbounded max depth.
"""

import dataclasses

import pytest

from foldernuker.domain.config import CONFIG_KEYS, ScanConfig, get_default_config


def test_default_config_covers_every_key():
    defaults = get_default_config()

    assert set(defaults) == set(CONFIG_KEYS)
    assert defaults["max_depth"] is None
    assert defaults["min_depth"] == 0


def test_unbounded_config_allows_any_depth():
    cfg = ScanConfig(target_path="/r")

    assert cfg.allows_descent(10_000)
    assert cfg.describe_max_depth() == "INF"


def test_bounded_config_window():
    cfg = ScanConfig(target_path="/r", min_depth=1, max_depth=2)

    assert not cfg.in_depth_window(0)
    assert cfg.in_depth_window(1)
    assert cfg.in_depth_window(2)
    assert not cfg.allows_descent(3)
    assert cfg.describe_max_depth() == "2"


def test_config_is_immutable():
    cfg = ScanConfig(target_path="/r")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.dry_run = True

