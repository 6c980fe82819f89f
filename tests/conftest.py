from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A directory-tree builder shared by the scanner and CLI tests.
3. Restoration of the root logger level, which the CLI reconfigures.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def _materialize(base: Path, layout: Dict[str, Any]) -> None:
    for name, content in layout.items():
        target = base / name
        if isinstance(content, dict):
            target.mkdir()
            _materialize(target, content)
        else:
            target.write_text(str(content), encoding="utf-8")


@pytest.fixture
def build_tree(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Return a factory that creates a directory tree under a fresh 'root'.

    Dict values become directories, anything else becomes a file with that
    text as content:

        build_tree({"a": {}, "b": {"file.txt": "x"}})
    """
    def _build(layout: Dict[str, Any]) -> Path:
        root = tmp_path / "root"
        root.mkdir()
        _materialize(root, layout)
        return root

    return _build


@pytest.fixture(autouse=True)
def restore_root_log_level() -> Iterator[None]:
    """Undo level changes made by configure_logging() inside a test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
