"""Tests for minclude CLI entrypoints."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import minclude.main as main


@pytest.fixture
def headers(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Three headers where root.h includes b.h both directly and through a.h."""
    (tmp_path / "root.h").write_text('#include "a.h"\n#include "b.h"\n', encoding="utf-8")
    (tmp_path / "a.h").write_text('#include "b.h"\n', encoding="utf-8")
    (tmp_path / "b.h").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    return tmp_path


def test_main_without_command_prints_help(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing subcommands make the CLI print help and succeed."""
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    exit_code = main.main([])

    assert exit_code == 0
    assert "minclude" in capsys.readouterr().out


def test_main_dispatches_fix_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    captured: dict[str, object] = {}

    def fake_fix_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "fix_command", fake_fix_command)

    assert main.main(["fix", "-b", "inc", "-d", "x.h", "y.h"]) == 0
    parsed = captured["args"]
    assert parsed.files == ["x.h", "y.h"]
    assert parsed.base == "inc"
    assert parsed.dry_run is True
    assert parsed.recursive is None


def test_fix_requires_two_files(headers: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main.main(["fix", "root.h"])

    assert exit_code == 0
    assert "at least 2 files" in capsys.readouterr().out
    assert (headers / "root.h").read_text(encoding="utf-8") == (
        '#include "a.h"\n#include "b.h"\n'
    )


def test_fix_dry_run_prints_report(headers: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main.main(["fix", "--dry-run", "root.h", "a.h", "b.h"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "root.h:" in out
    assert "  + a.h" in out
    assert "  - b.h" in out
    assert (headers / "root.h").read_text(encoding="utf-8") == (
        '#include "a.h"\n#include "b.h"\n'
    )


def test_fix_rewrites_and_writes_report(headers: Path) -> None:
    report = headers / "out" / "report.json"

    exit_code = main.main(["fix", "root.h", "a.h", "b.h", "--report", str(report)])

    assert exit_code == 0
    assert (headers / "root.h").read_text(encoding="utf-8") == '#include "a.h"\n'
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["files"]["root.h"] == {"kept": ["a.h"], "removed": ["b.h"]}
    assert data["files"]["a.h"] == {"kept": ["b.h"], "removed": []}
    assert data["cycles"] == []


def test_fix_aborts_on_cycle(headers: Path) -> None:
    (headers / "b.h").write_text('#include "a.h"\n', encoding="utf-8")

    exit_code = main.main(["fix", "root.h", "a.h", "b.h"])

    assert exit_code == 1
    assert (headers / "root.h").read_text(encoding="utf-8") == (
        '#include "a.h"\n#include "b.h"\n'
    )


def test_fix_tolerates_cycle_when_asked(headers: Path) -> None:
    (headers / "b.h").write_text('#include "a.h"\n', encoding="utf-8")

    exit_code = main.main(["fix", "--tolerate-cycles", "root.h", "a.h", "b.h"])

    assert exit_code == 0
    assert (headers / "root.h").read_text(encoding="utf-8") == '#include "a.h"\n'


def test_fix_config_file_and_flag_override(headers: Path) -> None:
    config = headers / "minclude.toml"
    config.write_text("dry_run = true\n", encoding="utf-8")

    exit_code = main.main(["fix", "-c", str(config), "root.h", "a.h", "b.h"])

    assert exit_code == 0
    assert (headers / "root.h").read_text(encoding="utf-8") == (
        '#include "a.h"\n#include "b.h"\n'
    )


def test_fix_invalid_config_fails(headers: Path) -> None:
    assert main.main(["fix", "-c", '{"extensions": []}', "root.h", "a.h"]) == 1


def test_fix_missing_file_fails(headers: Path) -> None:
    assert main.main(["fix", "root.h", "missing.h"]) == 1


def test_cycles_lists_closed_loops(headers: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (headers / "b.h").write_text('#include "a.h"\n', encoding="utf-8")

    exit_code = main.main(["cycles", "root.h", "a.h", "b.h"])

    assert exit_code == 0
    assert "Cycle 1: a.h -> b.h -> a.h" in capsys.readouterr().out


def test_cycles_fail_on_cycle(headers: Path) -> None:
    (headers / "b.h").write_text('#include "a.h"\n', encoding="utf-8")

    assert main.main(["cycles", "--fail-on-cycle", "a.h", "b.h"]) == 1


def test_cycles_none_found(headers: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main.main(["cycles", "--fail-on-cycle", "-r", "."])

    assert exit_code == 0
    assert "No include cycles among 3 file(s)" in capsys.readouterr().out


def test_fix_recursive_with_unscannable_roots(
    headers: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing directories and plain files find no headers instead of crashing."""
    assert main.main(["fix", "-r", "nope", "missing"]) == 0
    assert "at least 2 files" in capsys.readouterr().out

    assert main.main(["fix", "-r", "a.h", "b.h"]) == 0
    assert "at least 2 files" in capsys.readouterr().out
    assert (headers / "root.h").read_text(encoding="utf-8") == (
        '#include "a.h"\n#include "b.h"\n'
    )


def test_cycles_recursive_missing_root(headers: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["cycles", "-r", "nope"]) == 0
    assert "No include cycles among 0 file(s)" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["fix", "cycles"])
def test_command_without_files_prints_usage(
    headers: Path, capsys: pytest.CaptureFixture[str], command: str
) -> None:
    exit_code = main.main([command])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert f"usage: minclude {command}" in out
    assert "FILES" in out
