"""Rich rendering utilities for graph query commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree as RichTree

if TYPE_CHECKING:
    from rich.console import Console

    from digraphkit._types import Tree

    from .graph_query import GraphSummary, PathResult


def _format_vertices(vertices: tuple[str, ...]) -> str:
    if not vertices:
        return "[dim]None[/dim]"
    return ", ".join(escape(v) for v in vertices)


def render_summary_table(summary: GraphSummary, console: Console) -> None:
    """Render a graph summary as a Rich table.

    Args:
        summary: GraphSummary to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("Vertices", str(summary.vertex_count))
    table.add_row("Edges", str(summary.edge_count))
    table.add_row("Sources", _format_vertices(summary.sources))
    table.add_row("Sinks", _format_vertices(summary.sinks))
    table.add_row("Self-loops", _format_vertices(summary.self_loops))
    cyclic = "[red]yes[/red]" if summary.has_cycle else "[green]no[/green]"
    table.add_row("Cyclic", cyclic)

    console.print(table)


def render_path(result: PathResult, console: Console) -> None:
    """Render the outcome of a path query.

    Args:
        result: PathResult to render.
        console: Rich Console to output to.

    """
    header = f"{escape(result.from_vertex)} → {escape(result.to_vertex)}"
    if result.edges is None:
        console.print(f"[red]No path[/red] {header}")
        return

    console.print(f"[bold]Path[/bold] {header} [dim]({len(result.edges)} edges)[/dim]")
    for edge in result.edges:
        console.print(f"  {escape(str(edge))}")


def render_forest(trees: list[Tree[str]], console: Console) -> None:
    """Render trees using Rich Tree.

    Unexpanded leaves are dimmed to distinguish them from expanded
    vertices that have no children.

    Args:
        trees: Trees to render.
        console: Rich Console to output to.

    """
    if not trees:
        console.print("[dim]Graph is empty[/dim]")
        return

    for tree in trees:
        rich_tree = RichTree(f"[bold]{escape(tree.root)}[/bold]")
        _add_tree_children(rich_tree, tree)
        console.print(rich_tree)


def _add_tree_children(parent: RichTree, tree: Tree[str]) -> None:
    """Recursively add children to a Rich Tree.

    Args:
        parent: Parent Tree node to add children to.
        tree: Tree whose children are added.

    """
    for child in tree.children or ():
        label = escape(child.root) if child.is_expanded else f"[dim]{escape(child.root)}[/dim]"
        child_tree = parent.add(label)
        _add_tree_children(child_tree, child)
