"""Generic directed graph abstraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from digraphkit._types import Edge, Tree

from ._algorithms import find_path, is_cyclic, reduce_edges, topological_sort

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, init=False)
class DirectedGraph[T]:
    """An immutable directed graph defined by its edges.

    This is a pure data structure with query methods. It is generic over
    the vertex type T, which must be hashable (e.g., str, int, tuple).

    Duplicate edges collapse to one. The first-occurrence order of the
    edges is kept so derived orderings are deterministic, but equality and
    hashing only consider the set of edges.

    The vertex set is derived from the edge endpoints, so a vertex without
    incident edges cannot be part of a graph.

    Attributes:
        edges: The deduplicated edges, in first-occurrence order.

    """

    edges: tuple[Edge[T], ...] = field(compare=False)
    _edge_set: frozenset[Edge[T]] = field(repr=False)

    def __init__(self, edges: Iterable[Edge[T]] = ()) -> None:
        ordered = tuple(dict.fromkeys(edges))
        object.__setattr__(self, "edges", ordered)
        object.__setattr__(self, "_edge_set", frozenset(ordered))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[T, T]]) -> DirectedGraph[T]:
        """Build a graph from a list of (tail, head) tuples.

        Args:
            pairs: List of (tail, head) tuples.

        Returns:
            A new DirectedGraph instance.

        Example:
            >>> graph = DirectedGraph.from_pairs([("a", "b"), ("b", "c")])
            >>> graph.vertices()
            ('a', 'b', 'c')

        """
        return cls(Edge.from_pair(pair) for pair in pairs)

    # -------------------------------------------------------------------------
    # Core queries
    # -------------------------------------------------------------------------

    def vertices(self) -> tuple[T, ...]:
        """All vertices in the graph, in order of first appearance."""
        return tuple(dict.fromkeys(v for edge in self.edges for v in (edge.tail, edge.head)))

    def vertex_count(self) -> int:
        """Return the number of distinct vertices."""
        return len(self.vertices())

    def edge_count(self) -> int:
        """Return the number of distinct edges."""
        return len(self.edges)

    def adjacency_map(self) -> dict[T, list[Edge[T]]]:
        """Map every vertex to its outgoing edges.

        Vertices without outgoing edges (sinks) map to an empty list.

        Example:
            >>> graph = DirectedGraph.from_pairs([("a", "b")])
            >>> {v: [str(e) for e in out] for v, out in graph.adjacency_map().items()}
            {'a': ['a -> b'], 'b': []}

        """
        return self._build_adjacency_map(lambda edge: edge.tail)

    def inverse_adjacency_map(self) -> dict[T, list[Edge[T]]]:
        """Map every vertex to its incoming edges.

        Vertices without incoming edges (sources) map to an empty list.
        """
        return self._build_adjacency_map(lambda edge: edge.head)

    def sources(self) -> tuple[T, ...]:
        """Get vertices with no incoming edges."""
        return tuple(v for v, incoming in self.inverse_adjacency_map().items() if not incoming)

    def sinks(self) -> tuple[T, ...]:
        """Get vertices with no outgoing edges."""
        return tuple(v for v, outgoing in self.adjacency_map().items() if not outgoing)

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def union(self, other: DirectedGraph[T]) -> DirectedGraph[T]:
        """Return a graph containing the edges of both graphs."""
        return DirectedGraph((*self.edges, *other.edges))

    def difference(self, other: DirectedGraph[T]) -> DirectedGraph[T]:
        """Return a graph with the edges of this graph that are not in `other`."""
        return self.difference_by_edges(other._edge_set)

    def difference_by_edges(self, edges: Collection[Edge[T]]) -> DirectedGraph[T]:
        """Return a graph without the given edges.

        Args:
            edges: Edges to remove. Edges not in the graph are ignored.

        Returns:
            A new DirectedGraph instance.

        """
        removed = frozenset(edges)
        return DirectedGraph(edge for edge in self.edges if edge not in removed)

    def difference_by_vertices(self, vertices: Collection[T]) -> DirectedGraph[T]:
        """Return a graph without the given vertices and all their incident edges.

        Args:
            vertices: Vertices to excise.

        Returns:
            A new DirectedGraph instance.

        """
        removed = frozenset(vertices)
        return DirectedGraph(
            edge for edge in self.edges if edge.tail not in removed and edge.head not in removed
        )

    def subgraph(self, vertices: Collection[T]) -> DirectedGraph[T]:
        """Create a subgraph containing only the specified vertices.

        Edges are kept only if both endpoints are in the vertex set.

        Args:
            vertices: Vertices to include in the subgraph.

        Returns:
            A new DirectedGraph instance.

        """
        return DirectedGraph(reduce_edges(self.edges, frozenset(vertices)))

    # -------------------------------------------------------------------------
    # Cycles and ordering
    # -------------------------------------------------------------------------

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle.

        Source vertices are peeled off repeatedly; if a non-empty graph
        remains that has no source, every remaining vertex lies on a cycle.

        Returns:
            True if the graph has a cycle, False otherwise.

        """
        return is_cyclic(self.edges)

    def topological_order(self) -> list[T] | None:
        """Return vertices in topological order (tails before heads).

        Returns:
            List of vertices, or None if the graph contains a cycle.

        """
        return topological_sort(self.adjacency_map())

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def get_path(self, from_vertex: T, to_vertex: T) -> tuple[Edge[T], ...] | None:
        """Return some path between the given vertices.

        The path is not guaranteed to be the shortest one.

        Args:
            from_vertex: The vertex the path starts at.
            to_vertex: The vertex the path ends at.

        Returns:
            The edges of the path, an empty tuple if both vertices are the
            same, or None if there is no such path.

        """
        return find_path(self.adjacency_map(), from_vertex, to_vertex)

    def path_exists(self, from_vertex: T, to_vertex: T) -> bool:
        """Check if there is a path between the given vertices."""
        return self.get_path(from_vertex, to_vertex) is not None

    # -------------------------------------------------------------------------
    # Forest decomposition
    # -------------------------------------------------------------------------

    def contained_trees(self) -> list[Tree[T]]:
        """Decompose the graph into one tree per source vertex.

        The decomposition is an approximation of the reachability structure:
        cross edges and edges re-entering an already placed subtree are not
        represented in the trees.

        Returns:
            List of trees, in the order of the sources.

        """
        return [self._build_tree(source) for source in self.sources()]

    def as_tree(self, root: T) -> Tree[T] | None:
        """Generate a tree from the graph with the given vertex as root.

        Args:
            root: The vertex to use as tree root.

        Returns:
            The tree, or None if `root` is not in the graph.

        """
        if root not in self:
            return None
        return self._build_tree(root)

    def _build_tree(self, root: T) -> Tree[T]:
        component = self.subgraph([v for v in self.vertices() if self._connected(root, v)])
        without_root = DirectedGraph(edge for edge in component.edges if edge.tail != root)
        children = without_root.sources()
        logger.debug(f"Expanding {root!r} with {len(children)} child roots")

        if children:
            subtrees = tuple(without_root._build_tree(child) for child in children)
        else:
            subtrees = tuple(Tree(v) for v in component.vertices() if v != root)
        return Tree(root, subtrees)

    def _connected(self, a: T, b: T) -> bool:
        return self.path_exists(a, b) or self.path_exists(b, a)

    def _build_adjacency_map(self, key: Callable[[Edge[T]], T]) -> dict[T, list[Edge[T]]]:
        return {vertex: [edge for edge in self.edges if key(edge) == vertex] for vertex in self.vertices()}

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return self.vertex_count()

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return any(edge.tail == vertex or edge.head == vertex for edge in self.edges)

    def __iter__(self) -> Iterator[Edge[T]]:
        """Iterate over the edges of the graph."""
        return iter(self.edges)
