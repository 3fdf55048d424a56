"""Shared test fixtures for Edgepath."""

from pathlib import Path

import pytest

from edgepath_core.config.models import EdgepathConfig
from edgepath_core.graph import LabeledGraph


def build_graph(*triples: tuple[str, str, str]) -> LabeledGraph:
    """Build a graph from (source, label, destination) triples."""
    graph = LabeledGraph()
    for source, label, destination in triples:
        graph.insert_edge(source, destination, label)
    return graph


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def three_cycle():
    """A -> B -> C -> A, every edge labeled 'e'."""
    return build_graph(("A", "e", "B"), ("B", "e", "C"), ("C", "e", "A"))


@pytest.fixture
def shortcut_graph():
    """A direct edge A -> B plus a two-edge detour A -> C -> B."""
    return build_graph(("A", "1", "B"), ("A", "2", "C"), ("C", "3", "B"))


@pytest.fixture
def diamond_graph():
    """Two equal-length routes S -> {X, Y} -> T and a longer one via Z."""
    return build_graph(
        ("S", "a", "X"),
        ("S", "b", "Y"),
        ("X", "c", "T"),
        ("Y", "d", "T"),
        ("S", "e", "Z"),
        ("Z", "f", "X"),
        ("T", "g", "S"),
    )


@pytest.fixture
def city_graph():
    """A small cyclic road network with a self-loop and an isolated pair."""
    return build_graph(
        ("Athens", "road", "Berlin"),
        ("Berlin", "rail", "Cairo"),
        ("Cairo", "ferry", "Athens"),
        ("Athens", "flight", "Cairo"),
        ("Cairo", "bus", "Delhi"),
        ("Delhi", "loop", "Delhi"),
        ("Berlin", "flight", "Delhi"),
        ("Oslo", "ferry", "Perth"),
    )


@pytest.fixture
def sample_config():
    return EdgepathConfig()


@pytest.fixture
def edge_file(tmp_path: Path) -> Path:
    """An edge file for the city graph, with a comment and a blank line."""
    path = tmp_path / "cities.txt"
    path.write_text(
        "# cities\n"
        "Athens road Berlin\n"
        "Berlin rail Cairo\n"
        "Cairo ferry Athens\n"
        "\n"
        "Athens flight Cairo\n"
        "Cairo bus Delhi\n"
        "Delhi loop Delhi\n"
        "Berlin flight Delhi\n"
        "Oslo ferry Perth\n"
    )
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no project-local or user-global edgepath.yaml in reach."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    return workdir
