"""Tests for the end-to-end reduction run."""

from pathlib import Path
from typing import Dict

import pytest

from minclude.config.schema import ReduceConfig
from minclude.errors import CycleError, MissingFileError
from minclude.runtime.pipeline import build_includes_graph, collect_inputs, fix_set, make_parser


def _write_tree(root: Path, files: Dict[str, str]) -> None:
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """inc/root.h includes a.h and b.h; a.h already includes b.h."""
    _write_tree(
        tmp_path,
        {
            "inc/root.h": '#pragma once\n#include "a.h"\n#include "b.h"\nint root;\n',
            "inc/a.h": '#pragma once\n#include "b.h"\n',
            "inc/b.h": "#pragma once\n",
        },
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_fix_set_removes_redundant_include(project: Path) -> None:
    files = collect_inputs(["inc"], ReduceConfig(base="inc", recursive=True))

    result = fix_set(files, ReduceConfig(base="inc"))

    by_id = {report.identifier: report for report in result.reports}
    assert [report.identifier for report in result.reports] == [
        "inc/a.h",
        "inc/b.h",
        "inc/root.h",
    ]
    assert by_id["inc/root.h"].kept == ["inc/a.h"]
    assert by_id["inc/root.h"].removed == ["inc/b.h"]
    assert by_id["inc/root.h"].rewritten is True
    assert (project / "inc/root.h").read_text(encoding="utf-8") == (
        '#pragma once\n#include "a.h"\nint root;\n'
    )
    assert (project / "inc/a.h").read_text(encoding="utf-8") == '#pragma once\n#include "b.h"\n'


def test_fix_set_dry_run_leaves_files_untouched(project: Path) -> None:
    before = (project / "inc/root.h").read_text(encoding="utf-8")
    files = [Path("inc/root.h"), Path("inc/a.h"), Path("inc/b.h")]

    result = fix_set(files, ReduceConfig(base="inc", dry_run=True))

    assert result.removed_map()["inc/root.h"] == ["inc/b.h"]
    assert all(not report.rewritten for report in result.reports)
    assert (project / "inc/root.h").read_text(encoding="utf-8") == before


def test_fix_set_strict_cycle_writes_nothing(project: Path) -> None:
    # b.h -> a.h closes the loop a.h -> b.h -> a.h
    (project / "inc/b.h").write_text('#include "a.h"\n', encoding="utf-8")
    before = (project / "inc/root.h").read_text(encoding="utf-8")
    files = [Path("inc/root.h"), Path("inc/a.h"), Path("inc/b.h")]

    with pytest.raises(CycleError):
        fix_set(files, ReduceConfig(base="inc"))

    assert (project / "inc/root.h").read_text(encoding="utf-8") == before


def test_fix_set_permissive_cycle_completes(project: Path) -> None:
    (project / "inc/b.h").write_text('#include "a.h"\n', encoding="utf-8")
    files = [Path("inc/root.h"), Path("inc/a.h"), Path("inc/b.h")]

    result = fix_set(files, ReduceConfig(base="inc", tolerate_cycles=True))

    assert result.cycles
    assert result.removed_map()["inc/root.h"] == ["inc/b.h"]
    assert (project / "inc/root.h").read_text(encoding="utf-8") == (
        '#pragma once\n#include "a.h"\nint root;\n'
    )


def test_fix_set_missing_file_aborts(project: Path) -> None:
    with pytest.raises(MissingFileError):
        fix_set([Path("inc/root.h"), Path("inc/nope.h")], ReduceConfig(base="inc"))


def test_includes_outside_the_input_set_are_leaves(project: Path) -> None:
    graph = build_includes_graph(
        [Path("inc/root.h")], make_parser(ReduceConfig(base="inc"))
    )

    assert graph == {"inc/root.h": ["inc/a.h", "inc/b.h"]}


def test_collect_inputs_drops_duplicates(project: Path) -> None:
    files = collect_inputs(
        ["inc/a.h", "./inc/a.h", "inc/b.h"], ReduceConfig()
    )

    assert files == [Path("inc/a.h"), Path("inc/b.h")]
