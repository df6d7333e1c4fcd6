"""Fix command implementation."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from rich.console import Console

from minclude.cli.report import render_reports
from minclude.config.loader import load_reduce_config
from minclude.config.schema import ReduceConfig
from minclude.errors import CycleError, MincludeError
from minclude.export.report import export_json
from minclude.runtime.pipeline import collect_inputs, fix_set

logger = logging.getLogger("minclude.cli.fix")


def config_overrides(args) -> Dict[str, Any]:
    """Collect config values given as command-line flags (None when absent)."""
    extensions = getattr(args, "extensions", None)
    return {
        "base": getattr(args, "base", None),
        "recursive": getattr(args, "recursive", None),
        "extensions": list(extensions) if extensions else None,
        "tolerate_cycles": getattr(args, "tolerate_cycles", None),
        "verbose": getattr(args, "report_verbose", None),
        "dry_run": getattr(args, "dry_run", None),
    }


def load_command_config(args) -> Optional[ReduceConfig]:
    """Build the run configuration, logging and returning None when invalid."""
    try:
        return load_reduce_config(getattr(args, "config", None), config_overrides(args))
    except (ValidationError, ValueError, TypeError, OSError) as e:
        logger.error("Invalid configuration: %s", e)
        return None


def fix_command(args, console: Optional[Console] = None) -> int:
    """Execute fix command.

    Args:
        args: Parsed command-line arguments.
        console: Rich console for the per-file report.

    Returns:
        int: Exit code (0 for success or nothing to do, 1 for failure).
    """
    config = load_command_config(args)
    if config is None:
        return 1

    console = console or Console()
    files = collect_inputs(args.files, config)
    if len(files) < config.min_files:
        console.print(
            f"Must specify at least {config.min_files} files (see --help)"
        )
        return 0

    try:
        result = fix_set(files, config)
    except CycleError as e:
        logger.error("Aborting, no files were modified: %s", e)
        return 1
    except MincludeError as e:
        logger.error("Include reduction failed: %s", e)
        return 1

    if config.verbose:
        render_reports(result.reports, console)

    report_path = getattr(args, "report", None)
    if report_path:
        try:
            export_json(
                result.kept_map(), result.removed_map(), result.cycles, Path(report_path)
            )
        except OSError as e:
            logger.error("Failed to write report %s: %s", report_path, e)
            return 1

    if result.cycles:
        logger.warning("Completed with %d include cycle(s)", len(result.cycles))

    return 0
