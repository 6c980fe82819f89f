from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (help messages, argument types,
defaults) and translates the parsed namespace into configuration overrides.
Usage errors are raised as CliUsageError instead of exiting, so the
application controller owns the exit code.
"""

import argparse
from typing import Any, Dict, NoReturn

from foldernuker.domain.config import APP_NAME

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

class CliUsageError(Exception):
    """Raised for malformed command lines (unknown flag, bad integer, ...)."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises on usage errors instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise CliUsageError(message)


def _non_negative_int(value: str) -> int:
    """argparse type for depth bounds."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0 (got {n})")
    return n


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the foldernuker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = _ArgumentParser(
        prog=APP_NAME,
        description="Recursively finds and deletes empty directories.",
        epilog="Depth is counted from the target directory, which is depth 0.",
    )

    # --- Target ---
    p.add_argument(
        "target",
        metavar="DIR",
        help="The starting directory to scan.",
    )

    # --- Deletion Policy ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without deleting anything.",
    )
    p.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Ask for confirmation before deleting each directory (slow on large trees).",
    )
    p.add_argument(
        "--min-depth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Only delete directories at depth N or deeper.",
    )
    p.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Do not descend below depth N (default: unlimited).",
    )

    # --- Diagnostics ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print more information about actions taken.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        metavar="PATH",
        help="Also write diagnostics to a rotating log file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the scan result as JSON when the scan finishes.",
    )

    return p


# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "target_path": args.target,
        "min_depth": args.min_depth,
        "max_depth": args.max_depth,
    }

    if args.dry_run:
        overrides["dry_run"] = True
    if args.verbose:
        overrides["verbose"] = True
    if args.interactive:
        overrides["interactive"] = True

    return overrides
