import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._graph import DirectedGraph

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error reading an edge-list file."""


class EdgeListDocument(BaseModel):
    """Schema of an edge-list TOML document.

    Example:
        edges = [["A", "B"], ["B", "C"]]

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    edges: list[tuple[str, str]] = Field(default_factory=list, description="(tail, head) pairs")


def toml_to_graph(toml_contents: dict[str, Any]) -> DirectedGraph[str]:
    """Convert parsed TOML contents to a graph.

    This is a pure function that validates the document shape and builds
    a DirectedGraph over string vertices.

    Args:
        toml_contents: The parsed TOML dictionary

    Returns:
        The graph described by the document

    Raises:
        GraphFileError: If the contents do not match the edge-list schema

    """
    try:
        document = EdgeListDocument.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid edge list: {e}"
        raise GraphFileError(msg) from e

    graph = DirectedGraph.from_pairs(document.edges)
    if graph.edge_count() != len(document.edges):
        logger.debug(f"Collapsed {len(document.edges) - graph.edge_count()} duplicate edges")
    return graph


def load_graph_from_toml(input_path: Path | str) -> DirectedGraph[str]:
    """Load a graph from an edge-list TOML file.

    Args:
        input_path: Path to the TOML file

    Returns:
        The graph described by the file

    Raises:
        GraphFileError: If the file is missing, is not valid TOML or does not
            match the edge-list schema

    """
    input_path = Path(input_path)

    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Edge list file not found: {input_path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise GraphFileError(msg) from e

    graph = toml_to_graph(toml_contents)
    logger.debug(f"Loaded {graph.edge_count()} edges from {input_path}")
    return graph
