"""Exception types raised by minclude."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union


class MincludeError(Exception):
    """Base class for all minclude failures."""


class CycleError(MincludeError):
    """Raised when a strict traversal revisits a node on its current path.

    Attributes:
        cycle: Identifiers from the repeated node to its recurrence, inclusive
            at both ends (``["a.h", "b.h", "a.h"]``).
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle: List[str] = list(cycle)
        super().__init__("cycle detected\n" + " -> ".join(self.cycle))


class MissingFileError(MincludeError):
    """Raised when an input file cannot be read or written back."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        message = f"cannot access {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = ["MincludeError", "CycleError", "MissingFileError"]
