"""Edge-file input."""

from edgepath_core.loader.models import EdgeFileError
from edgepath_core.loader.reader import load_graph, parse_edge_line, parse_edges, read_edges

__all__ = [
    "EdgeFileError",
    "load_graph",
    "parse_edge_line",
    "parse_edges",
    "read_edges",
]
