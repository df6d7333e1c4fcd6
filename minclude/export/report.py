"""JSON export for reduction results."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

logger = logging.getLogger("minclude.export.report")


def export_json(
    kept: Mapping[str, Sequence[str]],
    removed: Mapping[str, Sequence[str]],
    cycles: Sequence[Sequence[str]],
    output_path: Path,
) -> None:
    """Export a reduction report to JSON format.

    Args:
        kept: Surviving includes per file.
        removed: Removed includes per file; its keys decide which files appear.
        cycles: Include cycles reported during a permissive run.
        output_path: Output file path.
    """
    logger.info("Exporting reduction report to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    data: Dict[str, Any] = {
        "files": {
            name: {
                "kept": list(kept.get(name, ())),
                "removed": list(removed[name]),
            }
            for name in sorted(removed)
        },
        "cycles": [list(cycle) for cycle in cycles],
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("JSON export completed: %d files", len(data["files"]))
