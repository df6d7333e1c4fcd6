"""Main CLI entry point for minclude.

Provides commands: fix, cycles
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from minclude.cli.cycles import cycles_command
from minclude.cli.fix import fix_command

logger = logging.getLogger("minclude.cli")


def setup_logging(debug: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        debug: Enable debug logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if debug:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] %(message)s",
        handlers=[handler],
        force=True,
    )


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command that builds an includes graph."""
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILES",
        help="Header files to process (directories with --recursive)",
    )
    parser.add_argument(
        "-b",
        "--base",
        help="Treat this directory as the root directory for includes",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=None,
        help="Find header files recursively under the given directories",
    )
    parser.add_argument(
        "-e",
        "--ext",
        dest="extensions",
        action="append",
        metavar="EXT",
        help="Header extension to consider, repeatable (default: .h)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. Command-line flags take precedence."
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="minclude",
        description="minclude - removes unnecessary #include directives from header files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fix command
    fix_parser = subparsers.add_parser(
        "fix",
        help="Remove includes already satisfied through another include",
    )
    _add_input_arguments(fix_parser)
    fix_parser.set_defaults(command_parser=fix_parser)
    fix_parser.add_argument(
        "-v",
        "--verbose",
        dest="report_verbose",
        action="store_true",
        default=None,
        help="Print kept (+) and removed (-) includes for every file",
    )
    fix_parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        default=None,
        help="Don't actually alter the files (implies -v)",
    )
    fix_parser.add_argument(
        "--tolerate-cycles",
        action="store_true",
        default=None,
        help="Warn about include cycles instead of aborting",
    )
    fix_parser.add_argument(
        "--report",
        help="Write a JSON report of kept/removed includes to this file",
    )

    # Cycles command
    cycles_parser = subparsers.add_parser(
        "cycles",
        help="List include cycles among the given headers",
    )
    _add_input_arguments(cycles_parser)
    cycles_parser.set_defaults(command_parser=cycles_parser)
    cycles_parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of cycles to report (default: 20, <=0 for no limit)",
    )
    cycles_parser.add_argument(
        "--fail-on-cycle",
        action="store_true",
        help="Exit with non-zero status when include cycles are found",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    # No FILES: show usage for the chosen command
    if args.command and not args.files:
        args.command_parser.print_help()
        return 0

    if args.command == "fix":
        return fix_command(args)
    elif args.command == "cycles":
        return cycles_command(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
