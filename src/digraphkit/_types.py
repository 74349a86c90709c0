"""Value types shared by the graph algorithms.

This module provides the two leaf data structures of the toolkit:
- Edge: an ordered (tail, head) connection between two vertices
- Tree: a rooted tree used as the output shape of forest decomposition

Both are frozen and hashable, so they can be stored in sets and shared
freely between derived graphs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator


@dataclass(frozen=True, slots=True)
class Edge[T]:
    """A directed edge from `tail` to `head`.

    Two edges are equal iff both endpoints match. There is no implicit
    symmetry: ``Edge("a", "b") != Edge("b", "a")``.

    Attributes:
        tail: The vertex the edge leaves.
        head: The vertex the edge enters.

    """

    tail: T
    head: T

    @classmethod
    def from_pair(cls, pair: tuple[T, T]) -> Edge[T]:
        """Build an edge from a ``(tail, head)`` tuple."""
        tail, head = pair
        return cls(tail, head)

    @property
    def is_self_loop(self) -> bool:
        """Check if the edge starts and ends at the same vertex."""
        return self.tail == self.head

    def reversed(self) -> Edge[T]:
        """Return the edge pointing the other way."""
        return Edge(self.head, self.tail)

    def __str__(self) -> str:
        return f"{self.tail} -> {self.head}"


@dataclass(frozen=True, slots=True)
class Tree[T]:
    """A rooted tree of vertices.

    `children` distinguishes two kinds of leaves:
    - ``None``: an unexpanded leaf, nothing further is known below it.
    - ``()``: an expanded node that genuinely has no children.

    Attributes:
        root: The vertex at the root of this (sub)tree.
        children: Tuple of subtrees, or None for an unexpanded leaf.

    """

    root: T
    children: tuple[Tree[T], ...] | None = None

    @property
    def is_expanded(self) -> bool:
        """Check if the children of this node were computed."""
        return self.children is not None

    @property
    def is_leaf(self) -> bool:
        """Check if this is a leaf node (unexpanded or without children)."""
        return not self.children

    @property
    def size(self) -> int:
        """Number of nodes in this tree, the root included."""
        if self.children is None:
            return 1
        return 1 + sum(child.size for child in self.children)

    def iter_vertices(self) -> Generator[T]:
        """Iterate over the vertices of this tree in pre-order.

        Yields:
            The root first, then the vertices of every subtree in order.

        """
        yield self.root
        for child in self.children or ():
            yield from child.iter_vertices()
