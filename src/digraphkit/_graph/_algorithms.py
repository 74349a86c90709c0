"""Graph algorithms operating on edge collections and adjacency maps."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from digraphkit._types import Edge

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Iterable, Iterator, Mapping, Sequence

logger = logging.getLogger(__name__)


def reduce_edges[T](edges: Iterable[Edge[T]], vertices: Collection[T]) -> list[Edge[T]]:
    """Keep only the edges whose endpoints both lie in `vertices`.

    Args:
        edges: The edges to filter.
        vertices: The allowed vertices.

    Returns:
        The matching edges, in their original order.

    Example:
        >>> edges = [Edge("a", "b"), Edge("b", "c"), Edge("c", "d")]
        >>> [str(e) for e in reduce_edges(edges, {"b", "c", "d"})]
        ['b -> c', 'c -> d']

    """
    return [edge for edge in edges if edge.tail in vertices and edge.head in vertices]


def peel_sources[T](edges: Sequence[Edge[T]]) -> list[Edge[T]] | None:
    """Remove every current source vertex together with its outgoing edges.

    A source is a vertex without incoming edges. The reduced edge list keeps
    only edges between vertices that still had incoming edges.

    Args:
        edges: Deduplicated edges of the graph.

    Returns:
        The reduced edge list, or None if no vertex could be removed
        (the graph is irreducible).

    """
    vertices = {v for edge in edges for v in (edge.tail, edge.head)}
    with_incoming = {edge.head for edge in edges}
    reduced = reduce_edges(edges, with_incoming)
    remaining = {v for edge in reduced for v in (edge.tail, edge.head)}
    if len(remaining) == len(vertices):
        return None
    return reduced


def is_cyclic[T](edges: Sequence[Edge[T]]) -> bool:
    """Check for a cycle by repeatedly peeling off source vertices.

    A finite DAG always has a source until it is empty, so a non-empty
    edge list that cannot be reduced further contains a cycle.

    Args:
        edges: Deduplicated edges of the graph.

    Returns:
        True if the edges contain a cycle (self-loops included).

    """
    current: Sequence[Edge[T]] = edges
    step = 0
    while current:
        reduced = peel_sources(current)
        if reduced is None:
            logger.debug(f"Irreducible after {step} peeling steps, {len(current)} edges remain")
            return True
        step += 1
        logger.debug(f"Peeling step {step}: {len(reduced)} edges remain")
        current = reduced
    logger.debug(f"Peeled to empty graph in {step} steps")
    return False


def find_path[T](
    successors: Mapping[T, Sequence[Edge[T]]],
    start: T,
    goal: T,
) -> tuple[Edge[T], ...] | None:
    """Find some path of edges from `start` to `goal`.

    A direct edge is preferred at every step; otherwise the outgoing edges
    are tried in order and the first successful branch wins. The result is
    not necessarily the shortest path.

    Each vertex is entered at most once per search, so the search terminates
    on cyclic graphs in O(V+E). The search keeps an explicit stack and does
    not recurse, so long chains do not hit the interpreter's recursion limit.

    Args:
        successors: Mapping from every vertex to its outgoing edges.
        start: The vertex the path starts at.
        goal: The vertex the path ends at.

    Returns:
        The edges of the path (empty if ``start == goal``), or None if no
        path exists or either vertex is not in `successors`.

    """
    if start == goal:
        return ()
    if start not in successors or goal not in successors:
        return None

    visited: set[T] = set()

    def enter(vertex: T) -> Edge[T] | None:
        """Mark `vertex` visited and return its direct edge to the goal, if any."""
        visited.add(vertex)
        for edge in successors[vertex]:
            if edge.head == goal:
                return edge
        return None

    direct = enter(start)
    if direct is not None:
        return (direct,)

    # stack[i] iterates the outgoing edges of the vertex reached by path[:i]
    path: list[Edge[T]] = []
    stack: list[Iterator[Edge[T]]] = [iter(successors[start])]
    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            if path:
                path.pop()
            continue
        if edge.head in visited:
            continue
        path.append(edge)
        direct = enter(edge.head)
        if direct is not None:
            return (*path, direct)
        stack.append(iter(successors[edge.head]))

    return None


def topological_sort[T: Hashable](successors: Mapping[T, Sequence[Edge[T]]]) -> list[T] | None:
    """Sort vertices topologically (tails before heads).

    Args:
        successors: Mapping from every vertex to its outgoing edges.

    Returns:
        List of vertices in topological order, or None if the graph
        contains a cycle.

    Example:
        >>> topological_sort({"a": [Edge("a", "b")], "b": [Edge("b", "c")], "c": []})
        ['a', 'b', 'c']

    """
    # Calculate in-degree for each vertex
    indegree: dict[T, int] = dict.fromkeys(successors, 0)
    for edges in successors.values():
        for edge in edges:
            indegree[edge.head] += 1

    # Start with vertices that have no incoming edges
    queue = deque([vertex for vertex, deg in indegree.items() if deg == 0])
    order: list[T] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for edge in successors[vertex]:
            indegree[edge.head] -= 1
            if indegree[edge.head] == 0:
                queue.append(edge.head)

    if len(order) != len(indegree):
        return None

    return order
