from __future__ import annotations

"""
Scan Domain Data Models.

Defines the per-directory outcome records emitted during a scan and the
result object handed back to the interface layer, plus their factories.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from foldernuker.domain.config import ScanConfig

# -----------------------------------------------------------------------------
# OUTCOME MODELS
# -----------------------------------------------------------------------------

class DirOutcome(str, Enum):
    """Final state of a directory that qualified or failed during the walk."""

    DELETED = "deleted"
    SIMULATED = "simulated"
    DECLINED = "declined"
    FAILED = "failed"
    INACCESSIBLE = "inaccessible"
    MISSING = "missing"

    @property
    def eliminated(self) -> bool:
        """True if ancestors must treat the directory as absent."""
        return self in (DirOutcome.DELETED, DirOutcome.SIMULATED)


@dataclass(frozen=True)
class DirRecord:
    """
    Outcome of a single directory.

    Attributes:
        path: Absolute directory path.
        depth: Levels below the scan root (root is 0).
        outcome: What happened to the directory.
        error: OS error text for FAILED, INACCESSIBLE and MISSING records.
    """
    path: str
    depth: int
    outcome: DirOutcome
    error: str = ""

    @property
    def eliminated(self) -> bool:
        return self.outcome.eliminated


# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanResult:
    """
    Unified result object of a complete scan.

    Attributes:
        ok: False only if the scan aborted on an unexpected error.
        error: Descriptive message in case of failure.
        target_path: Root directory of the scan.
        dry_run: Whether filesystem mutation was disabled.
        min_depth: Configured shallowest removable depth.
        max_depth: Configured deepest visited depth (None is unbounded).
        root_eliminated: Whether the root itself was removed (or would be).
        records: Outcome records in emission order (post-order).
        summary: Count of records per outcome value.
    """
    ok: bool
    error: str

    target_path: str
    dry_run: bool
    min_depth: int
    max_depth: Optional[int]

    root_eliminated: bool = False
    records: List[DirRecord] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def paths_with(self, outcome: DirOutcome) -> List[str]:
        """Return the paths of every record carrying ``outcome``."""
        return [r.path for r in self.records if r.outcome is outcome]


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def summarize_records(records: List[DirRecord]) -> Dict[str, int]:
    """Count records per outcome, listing every outcome even when zero."""
    counts = {o.value: 0 for o in DirOutcome}
    for rec in records:
        counts[rec.outcome.value] += 1
    return counts


def create_scan_result(
        cfg: ScanConfig,
        root_eliminated: bool,
        records: List[DirRecord],
) -> ScanResult:
    """
    Create a completed scan result.

    Args:
        cfg: Configuration the scan ran with.
        root_eliminated: Return value of the evaluator for the root.
        records: Records collected during the walk.

    Returns:
        ScanResult: An immutable success result object.
    """
    return ScanResult(
        ok=True,
        error="",
        target_path=cfg.target_path,
        dry_run=cfg.dry_run,
        min_depth=cfg.min_depth,
        max_depth=cfg.max_depth,
        root_eliminated=root_eliminated,
        records=list(records),
        summary=summarize_records(records),
    )


def create_error_result(
        error: str,
        cfg: ScanConfig,
        records: Optional[List[DirRecord]] = None,
) -> ScanResult:
    """
    Create a failed scan result, keeping whatever was recorded before the
    failure so the caller can still report it.
    """
    recs = list(records or [])
    return ScanResult(
        ok=False,
        error=error,
        target_path=cfg.target_path,
        dry_run=cfg.dry_run,
        min_depth=cfg.min_depth,
        max_depth=cfg.max_depth,
        root_eliminated=False,
        records=recs,
        summary=summarize_records(recs),
    )
