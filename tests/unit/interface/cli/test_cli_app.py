from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process and checks exit codes, stdout lines and stderr
messages for the documented scenarios.
"""

import json
from pathlib import Path

import pytest

from foldernuker.core.services.deletion_gate import scripted_confirm
from foldernuker.domain.scan_models import DirOutcome, DirRecord
from foldernuker.interface.cli.app import _merge_config, format_record, main


# -----------------------------------------------------------------------------
# EXIT CODES AND VALIDATION
# -----------------------------------------------------------------------------

def test_no_arguments_prints_help_and_fails(capsys) -> None:
    assert main([]) == 1
    assert "usage: foldernuker" in capsys.readouterr().out


def test_help_exits_zero(capsys) -> None:
    assert main(["--help"]) == 0
    assert "--max-depth" in capsys.readouterr().out


def test_missing_target_fails_before_scan(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing"

    assert main([str(missing)]) == 1

    err = capsys.readouterr().err
    assert "does not exist" in err
    assert str(missing) in err


def test_min_greater_than_max_fails(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path), "--min-depth", "3", "--max-depth", "1"]) == 1
    assert "ERROR:" in capsys.readouterr().err


@pytest.mark.parametrize(
    "extra",
    [["--min-depth", "x"], ["--unknown"], ["second_target"]],
)
def test_usage_errors_exit_one(tmp_path: Path, capsys, extra) -> None:
    assert main([str(tmp_path)] + extra) == 1
    assert "ERROR:" in capsys.readouterr().err


# -----------------------------------------------------------------------------
# SCENARIOS
# -----------------------------------------------------------------------------

def test_deletes_empty_sibling_only(build_tree, capsys) -> None:
    root = build_tree({"a": {}, "b": {"file.txt": "x"}})

    assert main([str(root)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [str(root / "a")]
    assert (root / "b").exists()


def test_verbose_output_has_header_tags_and_summary(build_tree, capsys) -> None:
    root = build_tree({"a": {}, "b": {"file.txt": "x"}})

    assert main([str(root), "-v", "--max-depth", "5"]) == 0

    out = capsys.readouterr().out
    assert f"Starting scan in: {root}" in out
    assert "Options: MinDepth=0 MaxDepth=5" in out
    assert f"Deleted: {root / 'a'}" in out
    assert "Scan done." in out


def test_max_depth_boundary_deletes_nothing(build_tree, capsys) -> None:
    root = build_tree({"x": {"y": {}}})

    assert main([str(root), "--max-depth", "1"]) == 0

    assert capsys.readouterr().out == ""
    assert (root / "x" / "y").exists()


def test_dry_run_output_is_repeatable(build_tree, capsys) -> None:
    root = build_tree({"p": {"q": {}}})

    assert main([str(root), "--dry-run"]) == 0
    first = capsys.readouterr().out
    assert main([str(root), "--dry-run"]) == 0
    second = capsys.readouterr().out

    assert first == second
    assert f"[DRY RUN] Would delete empty dir: {root / 'p' / 'q'}" in first
    assert f"[DRY RUN] Would delete empty dir: {root}" in first
    assert (root / "p" / "q").exists()


def test_interactive_decline_is_reported_in_verbose_mode(build_tree, capsys) -> None:
    root = build_tree({"p": {"q": {}}})

    code = main([str(root), "-i", "-v"], confirm=scripted_confirm(["no"]))

    assert code == 0
    out = capsys.readouterr().out
    assert f"Skipped (interactive): {root / 'p' / 'q'}" in out
    assert (root / "p" / "q").exists()


def test_json_output(build_tree, capsys) -> None:
    root = build_tree({"a": {}})

    assert main([str(root), "--dry-run", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["dry_run"] is True
    assert data["root_eliminated"] is True
    assert [r["outcome"] for r in data["records"]] == ["simulated", "simulated"]


def test_log_file_receives_diagnostics(build_tree, tmp_path: Path) -> None:
    root = build_tree({"a": {}})
    log_file = tmp_path / "logs" / "scan.log"

    assert main([str(root), "--debug", "--log-file", str(log_file)]) == 0

    content = log_file.read_text(encoding="utf-8")
    assert "Removed directory" in content


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def test_merge_config_ignores_none_and_unknown_keys() -> None:
    base = {"target_path": "", "min_depth": 0, "max_depth": None}
    merged = _merge_config(base, {"target_path": "/d", "min_depth": None, "junk": 1})

    assert merged == {"target_path": "/d", "min_depth": 0, "max_depth": None}


@pytest.mark.parametrize(
    "outcome, verbose, expected",
    [
        (DirOutcome.DELETED, False, "/d"),
        (DirOutcome.DELETED, True, "Deleted: /d"),
        (DirOutcome.SIMULATED, False, "[DRY RUN] Would delete empty dir: /d"),
        (DirOutcome.DECLINED, True, "Skipped (interactive): /d"),
        (DirOutcome.DECLINED, False, None),
        (DirOutcome.FAILED, True, None),
        (DirOutcome.INACCESSIBLE, True, None),
    ],
)
def test_format_record(outcome, verbose, expected) -> None:
    assert format_record(DirRecord(path="/d", depth=1, outcome=outcome), verbose) == expected
