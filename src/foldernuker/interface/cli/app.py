from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging and validation, the scan itself, and rendering of
per-directory output lines on stdout. Diagnostics go to stderr through
logging and never change the exit code of a completed scan.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from foldernuker.core.services.deletion_gate import ConfirmFn
from foldernuker.core.services.scanner import run_scan
from foldernuker.core.services.validator import validate_config
from foldernuker.domain.config import CONFIG_KEYS, ScanConfig, get_default_config
from foldernuker.domain.scan_models import DirOutcome, DirRecord, ScanResult
from foldernuker.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    level_for_cli,
    shutdown_logging,
)
from foldernuker.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, *, confirm: Optional[ConfirmFn] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        confirm: Confirmation source for --interactive. Defaults to the
                 console prompt.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if argv is None:
        argv = sys.argv[1:]

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    if not argv:
        parser.print_help()
        return EXIT_ERROR

    try:
        args = parser.parse_args(argv)
    except cli_args.CliUsageError as e:
        parser.print_usage(sys.stderr)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR
    except SystemExit as e:
        # --help exits through argparse
        return int(e.code or 0)

    # 2. Logging bootstrap (stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=level_for_cli(args.verbose, args.debug),
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf, force=True)

    try:
        return _run(args, confirm)
    finally:
        shutdown_logging()


def _run(args: Any, confirm: Optional[ConfirmFn]) -> int:
    """Validate the configuration, run the scan and render the result."""
    # 3. Merge overrides over defaults and validate
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    try:
        config = validate_config(raw_conf)
    except (TypeError, ValueError) as e:
        logger.debug(f"Configuration rejected: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if config.verbose and not args.json_output:
        _print_scan_header(config)

    # 4. Scan phase
    on_record = None if args.json_output else (lambda rec: _print_record(rec, config.verbose))
    try:
        result = run_scan(config, confirm=confirm, on_record=on_record)
    except KeyboardInterrupt:
        print("Scan interrupted by user.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Scan failed: {e}", exc_info=True)
        print(f"ERROR: Scan failed: {e}", file=sys.stderr)
        return EXIT_ERROR

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif config.verbose:
        _print_human_summary(result)

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The default configuration dictionary.
        overrides: Values mapped from the command line.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def format_record(record: DirRecord, verbose: bool) -> Optional[str]:
    """
    Render the stdout line for a record, or None if it prints nothing.

    Errors are not rendered here; they reach stderr through logging.
    """
    if record.outcome is DirOutcome.DELETED:
        return f"Deleted: {record.path}" if verbose else record.path
    if record.outcome is DirOutcome.SIMULATED:
        return f"[DRY RUN] Would delete empty dir: {record.path}"
    if record.outcome is DirOutcome.DECLINED and verbose:
        return f"Skipped (interactive): {record.path}"
    return None


def _print_record(record: DirRecord, verbose: bool) -> None:
    line = format_record(record, verbose)
    if line is not None:
        print(line, flush=True)


def _print_scan_header(config: ScanConfig) -> None:
    options = []
    if config.dry_run:
        options.append("DryRun")
    if config.interactive:
        options.append("Interactive")
    options.append(f"MinDepth={config.min_depth}")
    options.append(f"MaxDepth={config.describe_max_depth()}")

    print(f"Starting scan in: {config.target_path}")
    print(f"Options: {' '.join(options)}")


def _print_human_summary(result: ScanResult) -> None:
    """Print the closing summary of a verbose run."""
    print("Scan done.")
    labels = {
        DirOutcome.SIMULATED: "Would delete",
        DirOutcome.DELETED: "Deleted",
        DirOutcome.DECLINED: "Skipped (interactive)",
        DirOutcome.FAILED: "Failed to delete",
        DirOutcome.INACCESSIBLE: "Inaccessible",
        DirOutcome.MISSING: "Vanished",
    }
    for outcome, label in labels.items():
        count = result.summary.get(outcome.value, 0)
        if count:
            print(f"  {label}: {count}")


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
