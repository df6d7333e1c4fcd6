"""Extraction of quoted ``#include`` directives from header text."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Pattern

from minclude.errors import MissingFileError
from minclude.utils.path_utils import qualify_include

logger = logging.getLogger("minclude.parsers.include_parser")

DEFAULT_EXTENSIONS = (".h",)


def build_include_pattern(extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Pattern[str]:
    """Compile the directive pattern for the given header extensions.

    Matches ``#include "dir/name.h"`` at the start of a line. The directive
    keyword is case-insensitive; the target is lowercase alphanumerics and
    slashes ending in one of ``extensions``.
    """
    suffixes = "|".join(re.escape(ext) for ext in sorted(set(extensions)))
    return re.compile(
        rf'^(?i:#include) "([a-z0-9/]+(?:{suffixes}))"',
        re.MULTILINE,
    )


class IncludeParser:
    """Extracts include targets and identifiers using an explicit pattern.

    Args:
        base: Base directory prepended to every include target.
        extensions: Header extensions accepted as include targets.
        pattern: Regex overriding the built-in pattern; its first group is
            the include target.
    """

    def __init__(
        self,
        base: str = "",
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        pattern: Optional[str] = None,
    ) -> None:
        self.base = base
        if pattern:
            self.pattern = re.compile(pattern, re.MULTILINE)
        else:
            self.pattern = build_include_pattern(extensions)

    def targets(self, text: str) -> List[str]:
        """Return include targets in file order, duplicates kept."""
        return [match.group(1) for match in self.pattern.finditer(text)]

    def extract(self, text: str) -> List[str]:
        """Return base-qualified include identifiers in file order."""
        return [qualify_include(target, self.base) for target in self.targets(text)]

    def match_line(self, line: str) -> Optional[str]:
        """Return the identifier a single line includes, if any."""
        match = self.pattern.search(line)
        if match is None:
            return None
        return qualify_include(match.group(1), self.base)

    def parse_file(self, path: Path) -> List[str]:
        """Read ``path`` and return its include identifiers.

        Raises:
            MissingFileError: If the file cannot be read.
        """
        try:
            text = read_source(path)
        except OSError as exc:
            raise MissingFileError(path, exc.strerror or str(exc)) from exc
        includes = self.extract(text)
        logger.debug("%s: %d include(s)", path, len(includes))
        return includes


def read_source(path: Path) -> str:
    """Read a source file, preserving line endings and undecodable bytes."""
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()
