"""Console rendering of reduction results."""

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from minclude.runtime.pipeline import FileReport


def render_reports(reports: Iterable[FileReport], console: Optional[Console] = None) -> None:
    """Print kept (+) and removed (-) includes for each file.

    Output per file::

        inc/root.h:
          + inc/a.h
          - inc/b.h
    """
    console = console or Console()
    for report in reports:
        console.print(Text(f"{report.identifier}:", style="bold"))
        for name in report.kept:
            console.print(Text(f"  + {name}", style="green"))
        for name in report.removed:
            console.print(Text(f"  - {name}", style="red"))
        console.print()
