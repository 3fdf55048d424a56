"""Tests for edgepath_core.output — path rendering and JSON reports."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from edgepath_core.output import (
    PathResult,
    QueryReport,
    format_path,
    path_labels,
    path_results,
)


class TestFormatPath:
    def test_single_edge(self, shortcut_graph):
        assert format_path(["A", "B"], shortcut_graph) == "A --- 1 ---> B"

    def test_multi_edge(self, shortcut_graph):
        assert format_path(["A", "C", "B"], shortcut_graph) == "A --- 2 ---> C --- 3 ---> B"

    def test_cycle(self, three_cycle):
        assert (
            format_path(["A", "B", "C", "A"], three_cycle)
            == "A --- e ---> B --- e ---> C --- e ---> A"
        )

    def test_missing_edge_renders_none(self, shortcut_graph):
        assert format_path(["B", "A"], shortcut_graph) == "B --- None ---> A"


class TestPathResults:
    def test_labels_follow_edges(self, city_graph):
        path = ["Athens", "Berlin", "Delhi"]
        assert path_labels(path, city_graph) == ["road", "flight"]

    def test_path_results(self, shortcut_graph):
        results = path_results([["A", "B"], ["A", "C", "B"]], shortcut_graph)
        assert results[0] == PathResult(nodes=["A", "B"], labels=["1"])
        assert results[1].edge_count == 2

    def test_empty_nodes_rejected(self):
        with pytest.raises(ValidationError):
            PathResult(nodes=[])


class TestQueryReport:
    def test_json_includes_counts(self, shortcut_graph):
        report = QueryReport(
            query="all",
            start="A",
            end="B",
            paths=path_results([["A", "B"], ["A", "C", "B"]], shortcut_graph),
        )
        data = json.loads(report.to_json())
        assert data["query"] == "all"
        assert data["count"] == 2
        assert data["length"] is None
        assert data["paths"][1] == {
            "nodes": ["A", "C", "B"],
            "labels": ["2", "3"],
            "edge_count": 2,
        }

    def test_empty_report(self):
        report = QueryReport(query="shortest", start="A", end="Z")
        assert json.loads(report.to_json())["count"] == 0

    def test_unknown_query_kind_rejected(self):
        with pytest.raises(ValidationError):
            QueryReport(query="pattern", start="A", end="B")
