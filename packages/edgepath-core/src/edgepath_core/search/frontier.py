"""Breadth-first shortest-path enumeration."""

from __future__ import annotations

from collections import deque

from edgepath_core.graph import LabeledGraph


def _neighbors(graph: LabeledGraph, label: str, sort_neighbors: bool) -> list[str]:
    found = graph.neighbors(label)
    return sorted(found) if sort_neighbors else found


def bfs_distances(
    graph: LabeledGraph, start: str, sort_neighbors: bool = False
) -> dict[str, int]:
    """Edge distance from *start* to every node reachable from it."""
    if not graph.contains(start):
        return {}
    dist = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for nxt in _neighbors(graph, current, sort_neighbors):
            if nxt not in dist:
                dist[nxt] = dist[current] + 1
                queue.append(nxt)
    return dist


def _target_length(
    graph: LabeledGraph, dist: dict[str, int], start: str, end: str
) -> int | None:
    if start != end:
        return dist.get(end)
    # Shortest cycle back onto start: the closest node with an edge into it.
    closing = [d + 1 for label, d in dist.items() if graph.edge_label(label, start) is not None]
    return min(closing, default=None)


def layered_shortest_paths(
    graph: LabeledGraph, start: str, end: str, sort_neighbors: bool = False
) -> list[list[str]]:
    """All fewest-edge paths from *start* to *end*.

    Only edges that advance exactly one BFS level are followed, so every
    walk is simple and no walk exceeds the target length. Paths come out in
    the same order a depth-first search over the same neighbor order would
    discover them.
    """
    dist = bfs_distances(graph, start, sort_neighbors)
    target = _target_length(graph, dist, start, end)
    if target is None:
        return []

    paths: list[list[str]] = []
    path = [start]
    frames = [iter(_neighbors(graph, start, sort_neighbors))]
    while frames:
        nxt = next(frames[-1], None)
        if nxt is None:
            frames.pop()
            path.pop()
            continue
        # Taking this edge makes a walk of `depth` edges.
        depth = len(path)
        if nxt == end:
            if depth == target:
                paths.append(path + [nxt])
        elif depth < target and dist.get(nxt) == depth:
            path.append(nxt)
            frames.append(iter(_neighbors(graph, nxt, sort_neighbors)))
    return paths
