from __future__ import annotations

"""
Scan Configuration Domain.

Defines the immutable configuration consumed by the scanner and the raw
default values the CLI overrides are merged into.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
APP_NAME = "foldernuker"
UNBOUNDED_LABEL = "INF"

CONFIG_KEYS = (
    "target_path",
    "dry_run",
    "verbose",
    "interactive",
    "min_depth",
    "max_depth",
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default raw configuration.

    ``max_depth`` of None means the scan descends without limit.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "target_path": "",
        "dry_run": False,
        "verbose": False,
        "interactive": False,
        "min_depth": 0,
        "max_depth": None,
    }


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ScanConfig:
    """
    Validated, immutable scan parameters.

    Instances are produced by the validator; nothing mutates them while a
    scan is running.

    Attributes:
        target_path: Absolute path of an existing directory (depth 0).
        dry_run: Report qualifying directories without removing them.
        verbose: Emit progress lines and verbose-only warnings.
        interactive: Ask for confirmation before each removal.
        min_depth: Shallowest depth at which a directory may be removed.
        max_depth: Deepest depth the walker descends to; None is unbounded.
    """
    target_path: str
    dry_run: bool = False
    verbose: bool = False
    interactive: bool = False
    min_depth: int = 0
    max_depth: Optional[int] = None

    def allows_descent(self, depth: int) -> bool:
        """Return True if a directory at ``depth`` may be visited."""
        return self.max_depth is None or depth <= self.max_depth

    def in_depth_window(self, depth: int) -> bool:
        """Return True if a directory at ``depth`` may be removed."""
        return depth >= self.min_depth and self.allows_descent(depth)

    def describe_max_depth(self) -> str:
        return UNBOUNDED_LABEL if self.max_depth is None else str(self.max_depth)
