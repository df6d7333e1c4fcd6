"""Depth-first walk over an includes graph with path-sensitive cycle detection.

The walk keeps the ancestor path of every pending node next to it on an
explicit stack, so sibling branches never share ancestor state. A node may
appear on many different paths and is visited once per path; only a node
recurring on its own path counts as a cycle.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from minclude.errors import CycleError

logger = logging.getLogger("minclude.graph.walker")

IncludesGraph = Mapping[str, Sequence[str]]
Visitor = Callable[[str], None]
CycleCallback = Callable[[List[str]], None]


def walk(
    graph: IncludesGraph,
    start: str,
    visit: Visitor,
    *,
    skip_start: bool = False,
    strict: bool = True,
    on_cycle: Optional[CycleCallback] = None,
) -> None:
    """Visit every node reachable from ``start`` in depth-first pre-order.

    Args:
        graph: Mapping from identifier to its direct includes. Missing keys
            are leaves.
        start: Identifier to begin from.
        visit: Called once per visited node, before its children.
        skip_start: Do not call ``visit`` for ``start`` itself.
        strict: Raise ``CycleError`` on the first cycle. When False the cycle
            is logged and reported through ``on_cycle``; the repeated node is
            still visited but not expanded again along that path.
        on_cycle: Receives each cycle found in permissive mode.

    Raises:
        CycleError: In strict mode, when a node recurs on its own path.
    """
    pending: List[Tuple[str, Tuple[str, ...]]] = [(start, ())]

    while pending:
        current, path = pending.pop()

        if current in path:
            cycle = list(path[path.index(current):]) + [current]
            if strict:
                raise CycleError(cycle)
            logger.warning("Include cycle detected: %s", " -> ".join(cycle))
            if on_cycle is not None:
                on_cycle(cycle)
            visit(current)
            continue

        if path or not skip_start:
            visit(current)

        deeper = path + (current,)
        # Reversed so the first child is popped (and fully explored) first
        for child in reversed(graph.get(current) or ()):
            pending.append((child, deeper))


__all__ = ["walk", "IncludesGraph", "Visitor", "CycleCallback"]
