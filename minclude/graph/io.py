"""networkx bridge for includes graphs."""

from __future__ import annotations

import itertools
import logging
from typing import List, Mapping, Optional, Sequence

import networkx as nx

logger = logging.getLogger("minclude.graph.io")


def to_digraph(graph: Mapping[str, Sequence[str]]) -> nx.DiGraph:
    """Build a ``DiGraph`` with one edge per distinct (file, include) pair.

    Roots are tagged ``root=True``; include targets that are not themselves
    inputs are added as plain nodes.
    """
    digraph = nx.DiGraph()
    for node, children in graph.items():
        digraph.add_node(node, root=True)
        for child in children:
            if child not in digraph:
                digraph.add_node(child, root=False)
            digraph.add_edge(node, child)
    return digraph


def find_cycles(
    graph: Mapping[str, Sequence[str]], limit: Optional[int] = None
) -> List[List[str]]:
    """Return elementary include cycles, each rotated to start at its smallest id.

    Args:
        graph: Includes graph.
        limit: Maximum number of cycles to return (None for all).
    """
    digraph = to_digraph(graph)
    cycles: List[List[str]] = []
    for cycle in itertools.islice(nx.simple_cycles(digraph), limit):
        pivot = cycle.index(min(cycle))
        cycles.append(cycle[pivot:] + cycle[:pivot])
    cycles.sort()
    logger.debug("Found %d include cycle(s)", len(cycles))
    return cycles


def close_cycle(cycle: Sequence[str]) -> List[str]:
    """Present a cycle as a closed loop: A -> B -> A."""
    if cycle and cycle[0] != cycle[-1]:
        return list(cycle) + [cycle[0]]
    return list(cycle)
