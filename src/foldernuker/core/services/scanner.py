from __future__ import annotations

"""
Scan Orchestration Service.

Entry point of the core: wires the confirmation source and record sink into
a ScanContext, evaluates the root at depth 0 and assembles the ScanResult.
"""

import logging
import sys
from typing import List, Optional

from foldernuker.core.services.deletion_gate import (
    ConfirmFn,
    RecordFn,
    ScanContext,
    console_confirm,
)
from foldernuker.core.services.evaluator import evaluate
from foldernuker.domain.config import ScanConfig
from foldernuker.domain.scan_models import (
    DirRecord,
    ScanResult,
    create_error_result,
    create_scan_result,
)

logger = logging.getLogger(__name__)

# One Python frame per directory level; PATH_MAX keeps real trees far shallower
_MIN_RECURSION_LIMIT = 10_000


def run_scan(
        config: ScanConfig,
        *,
        confirm: Optional[ConfirmFn] = None,
        on_record: Optional[RecordFn] = None,
) -> ScanResult:
    """
    Scan the configured tree and remove every eliminated directory.

    Args:
        config: Validated scan parameters.
        confirm: Confirmation source for interactive mode. Defaults to a
                 console prompt.
        on_record: Optional observer called for each record as it is
                   decided (used by the CLI to stream output lines).

    Returns:
        ScanResult: Result with every record in post-order. An unexpected
                    exception yields ok=False with the records gathered so far.
    """
    records: List[DirRecord] = []

    def _collect(record: DirRecord) -> None:
        records.append(record)
        if on_record is not None:
            on_record(record)

    ctx = ScanContext(
        config=config,
        confirm=confirm or console_confirm,
        on_record=_collect,
    )

    logger.debug(
        f"Scanning {config.target_path} "
        f"(dry_run={config.dry_run}, interactive={config.interactive}, "
        f"min_depth={config.min_depth}, max_depth={config.describe_max_depth()})"
    )

    previous_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous_limit, _MIN_RECURSION_LIMIT))
    try:
        root_eliminated = evaluate(config.target_path, 0, ctx)
    except RecursionError:
        logger.critical(f"Directory tree under {config.target_path} is too deep to walk.")
        return create_error_result("Maximum recursion depth exceeded.", config, records)
    finally:
        sys.setrecursionlimit(previous_limit)

    logger.debug(f"Scan finished with {len(records)} record(s).")
    return create_scan_result(config, root_eliminated, records)
