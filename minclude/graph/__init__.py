"""Public graph API surface."""

from minclude.graph.io import close_cycle, find_cycles, to_digraph
from minclude.graph.reducer import reduce_includes, reduce_root
from minclude.graph.walker import IncludesGraph, walk

__all__ = [
    "IncludesGraph",
    "close_cycle",
    "find_cycles",
    "reduce_includes",
    "reduce_root",
    "to_digraph",
    "walk",
]
