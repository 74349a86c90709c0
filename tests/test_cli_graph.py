"""Tests for the graph query functions and CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from digraphkit import DirectedGraph, Edge, Tree
from digraphkit._cli.graph_query import (
    GraphSummary,
    PathResult,
    find_vertex_path,
    get_forest,
    summarize_graph,
)
from digraphkit._cli.main import app

runner = CliRunner()


@pytest.fixture
def forest_graph() -> DirectedGraph[str]:
    return DirectedGraph.from_pairs([("A", "B"), ("A", "C"), ("C", "E"), ("D", "E")])


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graph.toml"
    path.write_text('edges = [["A", "B"], ["A", "C"], ["C", "E"], ["D", "E"]]\n')
    return path


@pytest.fixture
def cyclic_file(tmp_path: Path) -> Path:
    path = tmp_path / "cyclic.toml"
    path.write_text('edges = [["A", "B"], ["B", "C"], ["C", "A"]]\n')
    return path


# --- query function tests ---


class TestSummarizeGraph:
    def test_summary(self, forest_graph: DirectedGraph[str]) -> None:
        summary = summarize_graph(forest_graph)
        assert summary == GraphSummary(
            vertex_count=5,
            edge_count=4,
            sources=("A", "D"),
            sinks=("B", "E"),
            has_cycle=False,
            self_loops=(),
        )

    def test_self_loops(self) -> None:
        summary = summarize_graph(DirectedGraph.from_pairs([("A", "A"), ("A", "B")]))
        assert summary.self_loops == ("A",)
        assert summary.has_cycle is True


class TestFindVertexPath:
    def test_found(self, forest_graph: DirectedGraph[str]) -> None:
        result = find_vertex_path(forest_graph, "A", "E")
        assert result.found is True
        assert result.edges == (Edge("A", "C"), Edge("C", "E"))

    def test_not_found(self, forest_graph: DirectedGraph[str]) -> None:
        result = find_vertex_path(forest_graph, "B", "E")
        assert result == PathResult(from_vertex="B", to_vertex="E", edges=None)
        assert result.found is False


class TestGetForest:
    def test_all_trees(self, forest_graph: DirectedGraph[str]) -> None:
        assert [tree.root for tree in get_forest(forest_graph)] == ["A", "D"]

    def test_single_root(self, forest_graph: DirectedGraph[str]) -> None:
        assert get_forest(forest_graph, "D") == [Tree("D", (Tree("E"),))]

    def test_unknown_root(self, forest_graph: DirectedGraph[str]) -> None:
        with pytest.raises(KeyError, match="Vertex not found"):
            get_forest(forest_graph, "Z")


# --- CLI command tests ---


class TestInfoCommand:
    def test_info(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["info", str(graph_file)])
        assert result.exit_code == 0
        assert "Vertices" in result.output
        assert "Cyclic" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["info", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_uses_configured_input(
        self,
        tmp_path: Path,
        graph_file: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        (tmp_path / "pyproject.toml").write_text(f'[tool.digraphkit]\ninput = "{graph_file.name}"\n')
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Vertices" in result.output

    def test_no_input_configured(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 1
        assert "No edge list given" in result.output


class TestPathCommand:
    def test_path_found(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["path", "A", "E", str(graph_file)])
        assert result.exit_code == 0
        assert "A -> C" in result.output
        assert "C -> E" in result.output

    def test_path_not_found(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["path", "B", "A", str(graph_file)])
        assert result.exit_code == 1
        assert "No path" in result.output


class TestTreesCommand:
    def test_trees(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["trees", str(graph_file)])
        assert result.exit_code == 0
        assert "A" in result.output
        assert "D" in result.output

    def test_unknown_root(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["trees", str(graph_file), "--root", "Z"])
        assert result.exit_code == 1
        assert "Vertex not found" in result.output


class TestCheckCommand:
    def test_acyclic(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["check", str(graph_file)])
        assert result.exit_code == 0

    def test_cyclic(self, cyclic_file: Path) -> None:
        result = runner.invoke(app, ["check", str(cyclic_file)])
        assert result.exit_code == 1
        assert "cycle" in result.output


class TestOrderCommand:
    def test_order(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["order", str(graph_file)])
        assert result.exit_code == 0
        lines = [line.strip() for line in result.output.splitlines() if line.strip() in {"A", "B", "C", "D", "E"}]
        assert lines.index("A") < lines.index("C") < lines.index("E")
        assert lines.index("D") < lines.index("E")

    def test_cyclic(self, cyclic_file: Path) -> None:
        result = runner.invoke(app, ["order", str(cyclic_file)])
        assert result.exit_code == 1


class TestVerboseOption:
    def test_verbose_shows_debug_messages(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["--verbose", "check", str(graph_file)])
        assert result.exit_code == 0
        assert "Peeled to empty graph" in result.output

    def test_debug_messages_hidden_by_default(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["check", str(graph_file)])
        assert result.exit_code == 0
        assert "Peeled to empty graph" not in result.output
