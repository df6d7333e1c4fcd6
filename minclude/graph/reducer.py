"""Transitive reduction of per-file include lists.

For each root, a direct include is redundant when it is reachable through
another direct include of the same root. Earlier entries win: the walk runs
from each surviving entry in list order and drops any later (or earlier)
entry found among its descendants.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, MutableMapping, Optional, Sequence

from minclude.graph.walker import CycleCallback, walk

logger = logging.getLogger("minclude.graph.reducer")


def reduce_root(
    graph: MutableMapping[str, List[str]],
    root: str,
    *,
    strict: bool = True,
    on_cycle: Optional[CycleCallback] = None,
) -> List[str]:
    """Reduce the include list of a single root in place.

    Args:
        graph: Includes graph; ``graph[root]`` is replaced by the surviving
            includes.
        root: Identifier whose direct includes are reduced.
        strict: Fail on include cycles instead of reporting them.
        on_cycle: Receives cycles found in permissive mode.

    Returns:
        List[str]: Removed identifiers in discovery order.

    Raises:
        CycleError: In strict mode, when a cycle is reachable from an include.
    """
    remaining: List[str] = list(graph.get(root) or ())
    removed: List[str] = []
    index = 0

    def _drop_if_listed(node: str) -> None:
        nonlocal index
        positions = [
            pos for pos, entry in enumerate(remaining)
            if entry == node and pos != index
        ]
        if not positions:
            return
        # Every removal before the cursor shifts the current entry left by one
        for pos in reversed(positions):
            del remaining[pos]
            if pos < index:
                index -= 1
        removed.append(node)
        logger.debug("%s: %s is reachable from %s", root, node, remaining[index])

    while index < len(remaining):
        walk(
            graph,
            remaining[index],
            _drop_if_listed,
            skip_start=True,
            strict=strict,
            on_cycle=on_cycle,
        )
        index += 1

    graph[root] = remaining
    return removed


def reduce_includes(
    graph: MutableMapping[str, List[str]],
    roots: Optional[Iterable[str]] = None,
    *,
    strict: bool = True,
    on_cycle: Optional[CycleCallback] = None,
) -> Dict[str, List[str]]:
    """Remove transitively implied includes from every root.

    ``graph`` is mutated so each root holds only its surviving includes.

    Args:
        graph: Includes graph built from the input files.
        roots: Identifiers to reduce. Defaults to every key of ``graph``.
            Processed in sorted order.
        strict: Fail on include cycles instead of reporting them.
        on_cycle: Receives cycles found in permissive mode.

    Returns:
        Dict[str, List[str]]: Removed identifiers per root (empty list when
        nothing was redundant).
    """
    targets: Sequence[str] = sorted(set(graph if roots is None else roots))
    removed: Dict[str, List[str]] = {}

    for root in targets:
        removed[root] = reduce_root(graph, root, strict=strict, on_cycle=on_cycle)

    total = sum(len(items) for items in removed.values())
    logger.info("Reduced %d file(s); %d redundant include(s)", len(targets), total)
    return removed


__all__ = ["reduce_root", "reduce_includes"]
