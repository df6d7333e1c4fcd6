"""Header discovery using scandir and generator pattern."""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Generator, Iterable, List, Optional, Sequence

logger = logging.getLogger("minclude.utils.scanner")

DEFAULT_IGNORES = (".git", ".svn", ".hg", "__pycache__")


def _is_ignored(name: str, ignore_patterns: Sequence[str]) -> bool:
    """Check an entry name against glob ignore patterns."""
    return any(fnmatch.fnmatch(name, pattern) for pattern in ignore_patterns)


def scan_headers(
    root_path: Path,
    extensions: Iterable[str],
    ignore_patterns: Optional[List[str]] = None,
    recursive: bool = True,
) -> Generator[Path, None, None]:
    """Scan files whose suffix is one of ``extensions``.

    Paths are yielded joined onto ``root_path`` as given (not resolved), in
    a deterministic depth-first order.

    Args:
        root_path: Root directory to scan.
        extensions: Accepted suffixes (e.g. ['.h', '.hpp']).
        ignore_patterns: Glob patterns matched against entry names.
        recursive: Whether to descend into subdirectories.

    Yields:
        Path objects for matching files.
    """
    suffixes = tuple(extensions)
    ignores = list(ignore_patterns or []) + list(DEFAULT_IGNORES)

    stack = [Path(root_path)]

    while stack:
        current_dir = stack.pop()

        try:
            # Sort for deterministic order
            entries = sorted(os.scandir(current_dir), key=lambda e: e.name)
        except PermissionError:
            logger.debug("Permission denied, skipping %s", current_dir)
            continue
        except OSError as exc:
            # Missing directory or a plain file given as a root
            logger.warning("Cannot scan %s: %s", current_dir, exc.strerror or exc)
            continue

        dirs = []

        for entry in entries:
            if _is_ignored(entry.name, ignores):
                continue
            path = current_dir / entry.name
            if entry.is_dir():
                if recursive:
                    dirs.append(path)
            elif entry.name.endswith(suffixes):
                yield path

        # Add dirs to stack (reversed to maintain order when popping)
        stack.extend(reversed(dirs))
