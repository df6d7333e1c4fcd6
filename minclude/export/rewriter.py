"""Rewrite header files without their redundant include directives."""

import logging
from pathlib import Path
from typing import Iterable, List

from minclude.errors import MissingFileError
from minclude.parsers.include_parser import IncludeParser, read_source
from minclude.utils.path_utils import unqualify_include

logger = logging.getLogger("minclude.export.rewriter")


def strip_includes(text: str, removed: Iterable[str], parser: IncludeParser) -> str:
    """Return ``text`` without the lines that include a removed identifier.

    A line is dropped when it contains the literal ``#include "<target>"``
    for a removed identifier, or when the include pattern resolves it to one.
    Every other line is kept verbatim with its original line ending.
    """
    removed_ids = set(removed)
    directives = [
        f'#include "{unqualify_include(identifier, parser.base)}"'
        for identifier in removed_ids
    ]

    kept: List[str] = []
    for line in text.splitlines(keepends=True):
        if any(directive in line for directive in directives):
            continue
        if parser.match_line(line) in removed_ids:
            continue
        kept.append(line)
    return "".join(kept)


def rewrite_includes(path: Path, removed: Iterable[str], parser: IncludeParser) -> bool:
    """Remove redundant include lines from ``path`` and overwrite it.

    Args:
        path: Header file to rewrite.
        removed: Identifiers whose include directives are dropped.
        parser: Parser carrying the base directory and include pattern.

    Returns:
        bool: True if the file content changed.

    Raises:
        MissingFileError: If the file cannot be read or written.
    """
    removed = list(removed)
    if not removed:
        return False

    try:
        original = read_source(path)
        fixed = strip_includes(original, removed, parser)
        if fixed == original:
            logger.debug("%s: nothing to rewrite", path)
            return False
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(fixed)
    except OSError as exc:
        raise MissingFileError(path, exc.strerror or str(exc)) from exc

    logger.debug("Rewrote %s (-%d include(s))", path, len(removed))
    return True
