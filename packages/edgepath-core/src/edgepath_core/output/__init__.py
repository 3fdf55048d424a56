"""Rendering of path query results."""

from edgepath_core.output.formatter import (
    PathResult,
    QueryKind,
    QueryReport,
    format_path,
    path_labels,
    path_results,
)

__all__ = [
    "PathResult",
    "QueryKind",
    "QueryReport",
    "format_path",
    "path_labels",
    "path_results",
]
