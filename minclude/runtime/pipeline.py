"""Read, reduce, rewrite: the end-to-end include reduction run.

Every input is read and every root reduced in memory before the first file
is written, so a strict-mode cycle or an unreadable file aborts the run
with the tree untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

from minclude.config.schema import ReduceConfig
from minclude.export.rewriter import rewrite_includes
from minclude.graph.reducer import reduce_includes
from minclude.parsers.include_parser import IncludeParser
from minclude.utils.path_utils import normalize_identifier
from minclude.utils.scanner import scan_headers

logger = logging.getLogger("minclude.runtime.pipeline")


@dataclass
class FileReport:
    """Outcome of the reduction for one input file."""

    identifier: str
    path: Path
    kept: List[str]
    removed: List[str]
    rewritten: bool = False


@dataclass
class FixResult:
    """Outcome of a whole run, reports sorted by identifier."""

    reports: List[FileReport] = field(default_factory=list)
    cycles: List[List[str]] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return sum(len(report.removed) for report in self.reports)

    @property
    def changed(self) -> List[FileReport]:
        return [report for report in self.reports if report.removed]

    def kept_map(self) -> Dict[str, List[str]]:
        return {report.identifier: report.kept for report in self.reports}

    def removed_map(self) -> Dict[str, List[str]]:
        return {report.identifier: report.removed for report in self.reports}


def make_parser(config: ReduceConfig) -> IncludeParser:
    """Build the include parser described by ``config``."""
    return IncludeParser(
        base=config.base,
        extensions=config.extensions,
        pattern=config.include_pattern,
    )


def collect_inputs(inputs: Sequence[str], config: ReduceConfig) -> List[Path]:
    """Expand command-line inputs into the list of header files.

    With ``config.recursive`` each input is a directory scanned for headers;
    otherwise inputs are taken as files. Duplicates are dropped, first
    occurrence kept.
    """
    files: List[Path] = []
    if config.recursive:
        for root in inputs:
            found = list(
                scan_headers(Path(root), config.extensions, config.ignore_patterns)
            )
            logger.debug("Discovered %d header(s) under %s", len(found), root)
            files.extend(found)
    else:
        files = [Path(item) for item in inputs]

    unique: Dict[str, Path] = {}
    for path in files:
        unique.setdefault(normalize_identifier(path), path)
    return list(unique.values())


def build_includes_graph(
    files: Sequence[Path], parser: IncludeParser
) -> Dict[str, List[str]]:
    """Map each file's identifier to its direct include identifiers.

    Raises:
        MissingFileError: If any file cannot be read.
    """
    graph: Dict[str, List[str]] = {}
    for path in files:
        graph[normalize_identifier(path)] = parser.parse_file(path)
    return graph


def fix_set(files: Sequence[Path], config: ReduceConfig) -> FixResult:
    """Remove transitively redundant includes from ``files``.

    Args:
        files: Header files; each is both a root and a potential include target.
        config: Run configuration.

    Returns:
        FixResult: Per-file kept/removed includes and any reported cycles.

    Raises:
        CycleError: In strict mode when an include cycle is reachable.
            Nothing has been written at that point.
        MissingFileError: If a file cannot be read or rewritten.
    """
    parser = make_parser(config)
    paths = {normalize_identifier(path): path for path in files}

    graph = build_includes_graph(list(paths.values()), parser)
    logger.info("Parsed %d file(s)", len(graph))

    result = FixResult()
    removed = reduce_includes(
        graph,
        paths.keys(),
        strict=config.strict,
        on_cycle=result.cycles.append,
    )

    for identifier in sorted(removed):
        result.reports.append(
            FileReport(
                identifier=identifier,
                path=paths[identifier],
                kept=list(graph[identifier]),
                removed=removed[identifier],
            )
        )

    if config.dry_run:
        logger.info("Dry run: %d include(s) would be removed", result.removed_count)
        return result

    for report in result.changed:
        report.rewritten = rewrite_includes(report.path, report.removed, parser)

    logger.info(
        "Removed %d include(s) from %d file(s)",
        result.removed_count,
        sum(1 for report in result.reports if report.rewritten),
    )
    return result
