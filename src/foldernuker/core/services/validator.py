from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper in front of the scanner: converts the raw
configuration dictionary (CLI overrides merged over defaults) into a
ScanConfig. Any type, range or path problem is fatal and raised before the
first directory is touched.
"""

import logging
from typing import Any, Dict, Optional

from foldernuker.domain.config import ScanConfig, get_default_config
from foldernuker.infra.fs import is_directory, normalize_path, path_exists

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> ScanConfig:
    """
    Validate and normalize a raw configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).

    Returns:
        ScanConfig: The validated, immutable configuration.

    Raises:
        TypeError: On malformed input types.
        ValueError: On negative depths, min_depth > max_depth, or a target
                    path that is missing, absent, or not a directory.
    """
    if not isinstance(config, dict):
        raise TypeError(f"Invalid config type: expected dict, received {type(config).__name__}.")

    merged: Dict[str, Any] = get_default_config()
    merged.update(config)

    # 1. Flags
    flags = {
        name: _as_bool(merged.get(name), name)
        for name in ("dry_run", "verbose", "interactive")
    }

    # 2. Depth window
    min_depth = _as_depth(merged.get("min_depth"), "min_depth")
    if min_depth is None:
        min_depth = 0
    max_depth = _as_depth(merged.get("max_depth"), "max_depth")

    if max_depth is not None and min_depth > max_depth:
        raise ValueError(
            f"--min-depth ({min_depth}) cannot be greater than --max-depth ({max_depth})."
        )

    # 3. Target directory
    target_path = _as_target(merged.get("target_path"))

    logger.debug(f"Configuration accepted for {target_path}")
    return ScanConfig(
        target_path=target_path,
        min_depth=min_depth,
        max_depth=max_depth,
        **flags,
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_bool(value: Any, field: str) -> bool:
    """Accept native booleans; an absent value means False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise TypeError(f"Invalid field '{field}': expected bool, received {type(value).__name__}.")


def _as_depth(value: Any, field: str) -> Optional[int]:
    """Validate a depth bound; None passes through as 'no bound'."""
    if value is None:
        return None

    # bool is an int subclass but never a meaningful depth
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Invalid field '{field}': expected int, received {type(value).__name__}.")

    if value < 0:
        raise ValueError(f"--{field.replace('_', '-')} cannot be negative (got {value}).")
    return value


def _as_target(value: Any) -> str:
    """Resolve the scan root and make sure it is an existing directory."""
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Invalid field 'target_path': expected str, received {type(value).__name__}.")

    target = normalize_path(value)
    if not target:
        raise ValueError("Target directory not specified.")
    if not path_exists(target):
        raise ValueError(f"Target directory does not exist: {target}")
    if not is_directory(target):
        raise ValueError(f"Target path is not a directory: {target}")
    return target
