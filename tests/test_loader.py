"""Tests for edgepath_core.loader — edge-line parsing and file reading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from edgepath_core.config.models import InputConfig
from edgepath_core.graph import Edge
from edgepath_core.loader import (
    EdgeFileError,
    load_graph,
    parse_edge_line,
    parse_edges,
    read_edges,
)


# ── parse_edge_line ──────────────────────────────────────────────────


class TestParseEdgeLine:
    def test_source_label_destination_order(self):
        edge = parse_edge_line("A knows B")
        assert edge == Edge(source="A", label="knows", destination="B")

    def test_extra_whitespace_tolerated(self):
        edge = parse_edge_line("  A\tknows   B  \n")
        assert edge == Edge(source="A", label="knows", destination="B")

    def test_blank_line_skipped(self):
        assert parse_edge_line("   \n") is None

    def test_comment_skipped(self):
        assert parse_edge_line("# A knows B") is None

    def test_custom_comment_prefix(self):
        assert parse_edge_line("// A knows B", comment_prefix="//") is None
        assert parse_edge_line("#A knows B", comment_prefix="//") == Edge(
            source="#A", label="knows", destination="B"
        )

    @pytest.mark.parametrize("line", ["A knows", "A", "A knows B too"])
    def test_wrong_token_count(self, line):
        with pytest.raises(EdgeFileError) as exc_info:
            parse_edge_line(line, line_number=7, path="graph.txt")
        assert exc_info.value.line_number == 7
        assert exc_info.value.path == "graph.txt"
        assert str(exc_info.value).startswith("graph.txt:7:")


# ── parse_edges ──────────────────────────────────────────────────────


class TestParseEdges:
    def test_line_numbers_count_skipped_lines(self):
        with pytest.raises(EdgeFileError) as exc_info:
            parse_edges(["# header", "", "A x B", "broken"])
        assert exc_info.value.line_number == 4

    def test_skip_malformed_logs_warning(self, caplog):
        config = InputConfig(skip_malformed=True)
        with caplog.at_level(logging.WARNING, logger="edgepath_core"):
            edges = parse_edges(["A x B", "broken line", "B y C"], config)
        assert [e.source for e in edges] == ["A", "B"]
        assert "Skipping malformed line" in caplog.text

    def test_empty_input(self):
        assert parse_edges([]) == []


# ── read_edges / load_graph ──────────────────────────────────────────


class TestReadEdges:
    def test_reads_file(self, edge_file: Path):
        edges = read_edges(edge_file)
        assert len(edges) == 8
        assert edges[0] == Edge(source="Athens", label="road", destination="Berlin")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(EdgeFileError, match="file not found") as exc_info:
            read_edges(tmp_path / "absent.txt")
        assert exc_info.value.line_number is None
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_unreadable(self, tmp_path: Path):
        with pytest.raises(EdgeFileError, match="cannot read file"):
            read_edges(tmp_path)

    def test_bad_encoding(self, tmp_path: Path):
        path = tmp_path / "latin.txt"
        path.write_bytes("Zürich road Bern\n".encode("latin-1"))
        with pytest.raises(EdgeFileError, match="cannot read file"):
            read_edges(path)
        edges = read_edges(path, InputConfig(encoding="latin-1"))
        assert edges[0].source == "Zürich"

    def test_unknown_codec(self, tmp_path: Path):
        path = tmp_path / "edges.txt"
        path.write_text("A x B\n")
        config = InputConfig.model_construct(
            comment_prefix="#", skip_malformed=False, encoding="bogus-enc"
        )
        with pytest.raises(EdgeFileError, match="cannot read file") as exc_info:
            read_edges(path, config)
        assert isinstance(exc_info.value.__cause__, LookupError)

    def test_malformed_line_reports_location(self, tmp_path: Path):
        path = tmp_path / "bad.txt"
        path.write_text("A x B\nB y\n")
        with pytest.raises(EdgeFileError) as exc_info:
            read_edges(path)
        assert exc_info.value.line_number == 2
        assert str(path) in str(exc_info.value)

    def test_load_graph(self, edge_file: Path):
        graph = load_graph(edge_file)
        assert len(graph) == 6
        assert graph.edge_count == 8
        assert graph.edge_label("Cairo", "Delhi") == "bus"

    def test_load_graph_overwrites_duplicate_pairs(self, tmp_path: Path):
        path = tmp_path / "dupes.txt"
        path.write_text("A x B\nA y B\n")
        graph = load_graph(path)
        assert graph.edge_label("A", "B") == "y"
        assert graph.edge_count == 1
