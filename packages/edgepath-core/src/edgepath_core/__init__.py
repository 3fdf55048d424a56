"""Edgepath Core - labeled directed graph store and simple-path search."""

from edgepath_core.config import EdgepathConfig
from edgepath_core.graph import Edge, LabeledGraph, Node
from edgepath_core.loader import EdgeFileError, load_graph, read_edges
from edgepath_core.output import QueryReport, format_path
from edgepath_core.search import (
    PathSearchEngine,
    all_paths,
    paths_of_length,
    shortest_paths,
)

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "EdgeFileError",
    "EdgepathConfig",
    "LabeledGraph",
    "Node",
    "PathSearchEngine",
    "QueryReport",
    "all_paths",
    "format_path",
    "load_graph",
    "paths_of_length",
    "read_edges",
    "shortest_paths",
]
