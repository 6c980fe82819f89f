from __future__ import annotations

"""
Recursive Emptiness Evaluator.

Post-order walk that decides, bottom-up, whether each directory is empty.
A directory is empty when it holds no non-directory entries and every
subdirectory was itself eliminated. Subdirectories past the depth ceiling
are never opened and keep their parent non-empty.

Traversal errors are folded into a False result for the affected node so
that one unreadable subtree never aborts the rest of the scan.
"""

import logging
from typing import List

from foldernuker.core.services.deletion_gate import ScanContext, apply_deletion_gate
from foldernuker.domain.scan_models import DirOutcome, DirRecord
from foldernuker.infra.fs import DirEntry, is_directory, list_entries

logger = logging.getLogger(__name__)


def evaluate(path: str, depth: int, ctx: ScanContext) -> bool:
    """
    Resolve one directory after all of its children.

    Args:
        path: Directory to evaluate.
        depth: Levels below the scan root (root is 0).
        ctx: Read-only scan context.

    Returns:
        bool: True if the directory was removed, or would have been removed
              under dry-run. False if it stays in the tree for any reason.
    """
    cfg = ctx.config

    if not is_directory(path):
        logger.warning(f"Path is not a directory or does not exist: {path}")
        ctx.on_record(DirRecord(path=path, depth=depth, outcome=DirOutcome.MISSING))
        return False

    # Children are enumerated once, before anything below is removed
    try:
        entries: List[DirEntry] = list_entries(path)
    except OSError as e:
        logger.error(f"Error accessing directory {path}: {e}")
        ctx.on_record(
            DirRecord(path=path, depth=depth, outcome=DirOutcome.INACCESSIBLE, error=str(e))
        )
        return False

    is_empty = True
    child_depth = depth + 1

    for entry in entries:
        if not entry.is_dir:
            is_empty = False
            continue

        if not cfg.allows_descent(child_depth):
            logger.debug(f"Beyond max depth, not descending: {entry.path}")
            is_empty = False
            continue

        logger.debug(f"Descending into {entry.path} (depth {child_depth})")
        if not evaluate(entry.path, child_depth, ctx):
            is_empty = False

    # Empty but too shallow: kept, so the parent must see it as content
    if not is_empty or not cfg.in_depth_window(depth):
        return False

    record = apply_deletion_gate(path, depth, ctx)
    ctx.on_record(record)
    return record.eliminated
