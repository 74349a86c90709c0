"""Graph module providing the directed graph abstraction.

This module contains:
- DirectedGraph[T]: A generic, immutable directed graph
- reduce_edges: Filtering of an edge list by an allowed vertex set
- is_cyclic / peel_sources: Cycle detection by source peeling
- find_path: Terminating depth-first path search
- topological_sort: Algorithm for ordering vertices along their edges
"""

from ._algorithms import find_path, is_cyclic, peel_sources, reduce_edges, topological_sort
from ._directed_graph import DirectedGraph

__all__ = [
    "DirectedGraph",
    "find_path",
    "is_cyclic",
    "peel_sources",
    "reduce_edges",
    "topological_sort",
]
