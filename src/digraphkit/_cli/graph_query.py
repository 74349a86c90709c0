"""Graph query functions for CLI commands.

This module provides pure functions for querying a loaded graph.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from digraphkit._graph import DirectedGraph
    from digraphkit._types import Edge, Tree


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Summary of a graph's contents."""

    vertex_count: int
    edge_count: int
    sources: tuple[str, ...]
    sinks: tuple[str, ...]
    has_cycle: bool
    self_loops: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PathResult:
    """Outcome of a path query between two vertices."""

    from_vertex: str
    to_vertex: str
    edges: tuple[Edge[str], ...] | None

    @property
    def found(self) -> bool:
        """Check if a path was found."""
        return self.edges is not None


def summarize_graph(graph: DirectedGraph[str]) -> GraphSummary:
    """Get summary information for a graph.

    Args:
        graph: The graph to analyze.

    Returns:
        GraphSummary with counts, sources, sinks and the cycle flag.

    """
    return GraphSummary(
        vertex_count=graph.vertex_count(),
        edge_count=graph.edge_count(),
        sources=graph.sources(),
        sinks=graph.sinks(),
        has_cycle=graph.has_cycle(),
        self_loops=tuple(edge.tail for edge in graph.edges if edge.is_self_loop),
    )


def find_vertex_path(graph: DirectedGraph[str], from_vertex: str, to_vertex: str) -> PathResult:
    """Search a path between two vertices.

    Args:
        graph: The graph to search.
        from_vertex: The start vertex.
        to_vertex: The end vertex.

    Returns:
        PathResult whose `edges` is None when no path exists.

    """
    return PathResult(
        from_vertex=from_vertex,
        to_vertex=to_vertex,
        edges=graph.get_path(from_vertex, to_vertex),
    )


def get_forest(graph: DirectedGraph[str], root: str | None = None) -> list[Tree[str]]:
    """Build the trees to display.

    Args:
        graph: The graph to decompose.
        root: If given, only the tree rooted at this vertex is built.

    Returns:
        List of trees (one per source vertex when `root` is None).

    Raises:
        KeyError: If `root` is not a vertex of the graph.

    """
    if root is None:
        return graph.contained_trees()

    tree = graph.as_tree(root)
    if tree is None:
        msg = f"Vertex not found: {root}"
        raise KeyError(msg)
    return [tree]
