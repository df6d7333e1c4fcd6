"""CLI command to list include cycles among a set of headers.

Builds the includes graph for the given files and reports every elementary
cycle. When requested, it can also fail the process so that CI pipelines
can enforce an acyclic include structure.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console

from minclude.cli.fix import load_command_config
from minclude.errors import MincludeError
from minclude.graph.io import close_cycle, find_cycles
from minclude.runtime.pipeline import build_includes_graph, collect_inputs, make_parser

logger = logging.getLogger("minclude.cli.cycles")


def cycles_command(args, console: Optional[Console] = None) -> int:
    """Execute include cycle inspection command.

    Args:
        args: Parsed command-line arguments.
        console: Rich console for the cycle listing.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    config = load_command_config(args)
    if config is None:
        return 1

    console = console or Console()
    files = collect_inputs(args.files, config)

    try:
        graph = build_includes_graph(files, make_parser(config))
    except MincludeError as e:
        logger.error("Failed to build includes graph: %s", e)
        return 1

    # Interpret limit: <= 0 means "no limit".
    limit_arg = getattr(args, "limit", None)
    limit: int | None
    if isinstance(limit_arg, int) and limit_arg > 0:
        limit = limit_arg
    else:
        limit = None

    cycles: List[List[str]] = find_cycles(graph, limit=limit)
    if not cycles:
        console.print(f"No include cycles among {len(graph)} file(s)")
        return 0

    logger.warning("Detected %d include cycle(s)", len(cycles))
    for idx, cycle in enumerate(cycles, start=1):
        console.print(f"Cycle {idx}: {' -> '.join(close_cycle(cycle))}")

    if getattr(args, "fail_on_cycle", False):
        logger.error("Include cycle validation failed")
        return 1

    return 0
