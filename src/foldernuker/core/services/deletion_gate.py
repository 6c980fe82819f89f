from __future__ import annotations

"""
Deletion Gate.

Decides what happens to a directory that already qualified for removal
(structurally empty, inside the depth window): interactive confirmation,
dry-run simulation, or the actual non-recursive removal. Confirmation is
an injected callable so scripted answer sources can replace the console.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from foldernuker.domain.config import ScanConfig
from foldernuker.domain.scan_models import DirOutcome, DirRecord
from foldernuker.infra.fs import path_exists, safe_rmdir

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]
RecordFn = Callable[[DirRecord], None]


# -----------------------------------------------------------------------------
# SCAN CONTEXT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanContext:
    """
    Read-only state shared by every recursive call of one scan.

    Attributes:
        config: Validated scan parameters.
        confirm: Answers "may this directory be removed?" in interactive mode.
        on_record: Receives each DirRecord as soon as it is decided.
    """
    config: ScanConfig
    confirm: ConfirmFn
    on_record: RecordFn


# -----------------------------------------------------------------------------
# CONFIRMATION SOURCES
# -----------------------------------------------------------------------------

def parse_confirmation(response: Optional[str]) -> bool:
    """
    Interpret a free-form yes/no answer.

    Only an answer whose very first character is 'y' (any case) counts as
    yes. Leading whitespace is not skipped, so " y" is a no, as is empty or
    unrecognized input.
    """
    return (response or "")[:1].lower() == "y"


def console_confirm(
        path: str,
        *,
        input_fn: Optional[Callable[[str], str]] = None,
) -> bool:
    """
    Prompt on the console and block until the user answers.

    End of input (closed stdin, piped input exhausted) is treated as no.
    """
    try:
        response = (input_fn or input)(f"Delete '{path}'? [y/N]: ")
    except EOFError:
        sys.stdout.write("\n")
        return False
    return parse_confirmation(response)


def scripted_confirm(answers: Iterable[str]) -> ConfirmFn:
    """
    Build a confirmation source that replays a fixed sequence of answers.

    Once the sequence is exhausted every further question is answered no.
    """
    pending = iter(answers)

    def _confirm(path: str) -> bool:
        answer = next(pending, "")
        logger.debug(f"Scripted answer for '{path}': {answer!r}")
        return parse_confirmation(answer)

    return _confirm


# -----------------------------------------------------------------------------
# GATE
# -----------------------------------------------------------------------------

def apply_deletion_gate(path: str, depth: int, ctx: ScanContext) -> DirRecord:
    """
    Run the confirmation / dry-run / removal policy for a qualifying directory.

    Args:
        path: Directory that is empty and within the depth window.
        depth: Its depth below the scan root.
        ctx: Scan context.

    Returns:
        DirRecord: DELETED or SIMULATED (eliminated), DECLINED or FAILED
                   (left in place).
    """
    cfg = ctx.config

    if cfg.interactive and not cfg.dry_run:
        if not ctx.confirm(path):
            logger.debug(f"Skipped by user: {path}")
            return DirRecord(path=path, depth=depth, outcome=DirOutcome.DECLINED)

    if cfg.dry_run:
        return DirRecord(path=path, depth=depth, outcome=DirOutcome.SIMULATED)

    ok, err = safe_rmdir(path)
    if ok:
        logger.debug(f"Removed directory: {path}")
        return DirRecord(path=path, depth=depth, outcome=DirOutcome.DELETED)

    # A vanished directory is a race, not a fault worth surfacing by default
    if not path_exists(path):
        logger.warning(f"Failed to delete (already gone?): {path}")
    else:
        logger.error(f"Error deleting directory {path}: {err}")
    return DirRecord(path=path, depth=depth, outcome=DirOutcome.FAILED, error=err or "")
