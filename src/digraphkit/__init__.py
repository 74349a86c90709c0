"""In-memory directed graph toolkit."""

__all__ = [
    "DirectedGraph",
    "Edge",
    "EdgeListDocument",
    "GraphFileError",
    "Tree",
    "find_path",
    "is_cyclic",
    "load_graph_from_toml",
    "peel_sources",
    "reduce_edges",
    "toml_to_graph",
    "topological_sort",
]

from ._graph import DirectedGraph, find_path, is_cyclic, peel_sources, reduce_edges, topological_sort
from ._io import EdgeListDocument, GraphFileError, load_graph_from_toml, toml_to_graph
from ._types import Edge, Tree
