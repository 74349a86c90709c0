import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from digraphkit._graph import DirectedGraph
from digraphkit._io import GraphFileError, load_graph_from_toml

from .config import ConfigError, get_config
from .graph_query import find_vertex_path, get_forest, summarize_graph
from .graph_render import render_forest, render_path, render_summary_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to edge-list TOML file (defaults to the configured input)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Directed graph toolkit CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr, replacing any
    # handler left by an earlier invocation in the same process
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        force=True,
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_graph(input_path: Path | None) -> DirectedGraph[str]:
    """Load the graph from the given file or the configured default.

    Exits with code 1 if no file is given and none is configured, or if the
    file cannot be read.
    """
    try:
        if input_path is None:
            config = get_config()
            if config.input is None:
                err_console.print(
                    f"[red]Error: No edge list given and no {escape('[tool.digraphkit]')}.input configured[/red]",
                )
                raise typer.Exit(code=1)
            input_path = config.input
            logger.debug(f"Using configured input {input_path}")

        err_console.print(f"[cyan]Loading edges from:[/cyan] {input_path}")
        return load_graph_from_toml(input_path)
    except (ConfigError, GraphFileError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def info(input: InputArgument = None) -> None:  # noqa: A002
    """Show vertex and edge counts, sources, sinks and whether the graph is cyclic."""
    graph = _load_graph(input)
    render_summary_table(summarize_graph(graph), out_console)


@app.command()
def path(
    from_vertex: Annotated[str, typer.Argument(help="Start vertex")],
    to_vertex: Annotated[str, typer.Argument(help="End vertex")],
    input: InputArgument = None,  # noqa: A002
) -> None:
    """Find a path between two vertices (exit non-zero if there is none)."""
    graph = _load_graph(input)
    result = find_vertex_path(graph, from_vertex, to_vertex)
    render_path(result, out_console)
    if not result.found:
        raise typer.Exit(code=1)


@app.command()
def trees(
    input: InputArgument = None,  # noqa: A002
    *,
    root: Annotated[
        str | None,
        typer.Option("--root", help="Only show the tree rooted at this vertex"),
    ] = None,
) -> None:
    """Decompose the graph into trees rooted at its source vertices."""
    graph = _load_graph(input)
    try:
        forest = get_forest(graph, root)
    except KeyError as e:
        err_console.print(f"[red]Error: {escape(str(e.args[0]))}[/red]")
        raise typer.Exit(code=1) from e
    render_forest(forest, out_console)


@app.command()
def check(input: InputArgument = None) -> None:  # noqa: A002
    """Check that the graph is acyclic (exit non-zero if it contains a cycle)."""
    graph = _load_graph(input)
    if graph.has_cycle():
        err_console.print("[red]✗ The graph contains a cycle.[/red]")
        raise typer.Exit(code=1)
    err_console.print("[green]✓ The graph is acyclic.[/green]")


@app.command()
def order(input: InputArgument = None) -> None:  # noqa: A002
    """Print the vertices in topological order (exit non-zero if the graph is cyclic)."""
    graph = _load_graph(input)
    ordering = graph.topological_order()
    if ordering is None:
        err_console.print("[red]✗ No topological order: the graph contains a cycle.[/red]")
        raise typer.Exit(code=1)
    for vertex in ordering:
        out_console.print(escape(vertex))


def main() -> None:
    app()
