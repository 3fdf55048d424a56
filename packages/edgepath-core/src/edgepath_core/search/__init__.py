"""Path search over a labeled graph."""

from edgepath_core.graph import LabeledGraph
from edgepath_core.search.engine import (
    NeighborOrder,
    PathSearchEngine,
    ShortestStrategy,
    TraversalContext,
)
from edgepath_core.search.frontier import bfs_distances, layered_shortest_paths


def all_paths(graph: LabeledGraph, start: str, end: str) -> list[list[str]]:
    """Convenience wrapper around PathSearchEngine.find_all_paths()."""
    return PathSearchEngine(graph).find_all_paths(start, end)


def paths_of_length(
    graph: LabeledGraph, start: str, end: str, length: int
) -> list[list[str]]:
    """Convenience wrapper around PathSearchEngine.find_paths_of_length()."""
    return PathSearchEngine(graph).find_paths_of_length(start, end, length)


def shortest_paths(
    graph: LabeledGraph, start: str, end: str, strategy: ShortestStrategy = "dfs"
) -> list[list[str]]:
    """Convenience wrapper around PathSearchEngine.find_shortest_paths()."""
    return PathSearchEngine(graph).find_shortest_paths(start, end, strategy)


__all__ = [
    "NeighborOrder",
    "PathSearchEngine",
    "ShortestStrategy",
    "TraversalContext",
    "all_paths",
    "bfs_distances",
    "layered_shortest_paths",
    "paths_of_length",
    "shortest_paths",
]
