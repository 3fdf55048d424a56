"""Depth-first backtracking path search over a LabeledGraph.

All three queries share one traversal: a single path buffer and visited set
are extended on entry to a node and retracted when the node's neighbors are
exhausted. What differs between queries is the acceptance policy, which
decides whether an arrival at the end node is recorded and whether a node
may be expanded further.

Traversal uses an explicit stack of neighbor iterators rather than Python
recursion, so search depth is bounded by graph size, not the interpreter's
recursion limit.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import Literal

from edgepath_core.graph import LabeledGraph, Node
from edgepath_core.search.frontier import layered_shortest_paths

logger = logging.getLogger(__name__)

NeighborOrder = Literal["insertion", "sorted"]
ShortestStrategy = Literal["dfs", "bfs"]


class TraversalContext:
    """Per-call traversal buffers. Never shared between searches."""

    def __init__(self, end: str) -> None:
        self.end = end
        self.path: list[str] = []
        self.visited: set[str] = set()
        self.paths: list[list[str]] = []

    @property
    def edge_count(self) -> int:
        return len(self.path) - 1

    def enter(self, label: str) -> None:
        self.path.append(label)
        self.visited.add(label)

    def leave(self) -> None:
        self.visited.discard(self.path.pop())

    def record(self) -> None:
        self.paths.append(list(self.path))


# ------------------------------------------------------------------
# Acceptance policies
# ------------------------------------------------------------------


class _AnyLength:
    def arrive(self, ctx: TraversalContext) -> None:
        ctx.record()

    def expand(self, ctx: TraversalContext) -> bool:
        return True


class _ExactLength:
    def __init__(self, length: int) -> None:
        self.length = length

    def arrive(self, ctx: TraversalContext) -> None:
        if ctx.edge_count == self.length:
            ctx.record()

    def expand(self, ctx: TraversalContext) -> bool:
        # A simple path never shrinks, so stop once the edge budget is spent.
        return len(ctx.path) <= self.length


class _Fewest:
    """Keeps only the paths with the fewest edges seen so far.

    Longer branches are still explored; the bound only filters what is
    recorded.
    """

    def __init__(self) -> None:
        self.best: float = math.inf

    def arrive(self, ctx: TraversalContext) -> None:
        edges = ctx.edge_count
        if edges < self.best:
            ctx.paths.clear()
            self.best = edges
            ctx.record()
        elif edges == self.best:
            ctx.record()

    def expand(self, ctx: TraversalContext) -> bool:
        return True


# ------------------------------------------------------------------
# Engine
# ------------------------------------------------------------------


class PathSearchEngine:
    """Answers path queries against a graph that is not mutated meanwhile.

    Returned paths never repeat a node, with one exception: when ``start``
    and ``end`` are the same label, a path may close back onto it as its
    final step (``[A, B, C, A]``). The single-node path ``[A]`` is never
    returned.
    """

    def __init__(
        self, graph: LabeledGraph, neighbor_order: NeighborOrder = "insertion"
    ) -> None:
        self._graph = graph
        self._neighbor_order = neighbor_order

    @property
    def graph(self) -> LabeledGraph:
        return self._graph

    def _ordered(self, node: Node) -> Iterator[str]:
        if self._neighbor_order == "sorted":
            return iter(sorted(node.neighbors))
        # Snapshot so a traversal never observes a dict being resized.
        return iter(list(node.neighbors))

    def _search(self, start: str, end: str, policy) -> list[list[str]]:
        ctx = TraversalContext(end)
        frames: list[Iterator[str]] = []

        def visit(label: str) -> None:
            ctx.enter(label)
            if label == ctx.end and len(ctx.path) > 1:
                policy.arrive(ctx)
                ctx.leave()
                return
            node = self._graph.get_node(label)
            if node is None or not policy.expand(ctx):
                ctx.leave()
                return
            frames.append(self._ordered(node))

        visit(start)
        while frames:
            nxt = next(frames[-1], None)
            if nxt is None:
                frames.pop()
                ctx.leave()
            elif nxt not in ctx.visited:
                visit(nxt)
            elif nxt == ctx.end:
                # end is only ever on the path as its first entry, so this
                # closes a cycle back onto start.
                ctx.path.append(nxt)
                policy.arrive(ctx)
                ctx.path.pop()

        return ctx.paths

    def find_all_paths(self, start: str, end: str) -> list[list[str]]:
        """Every simple directed path from *start* to *end*."""
        paths = self._search(start, end, _AnyLength())
        logger.debug("all paths %s -> %s: %d found", start, end, len(paths))
        return paths

    def find_paths_of_length(
        self, start: str, end: str, length: int
    ) -> list[list[str]]:
        """Simple paths from *start* to *end* with exactly *length* edges.

        Lengths below 1 yield no paths, since a result always crosses at
        least one edge.
        """
        if length < 1:
            logger.debug("edge count %d requested; no path can match", length)
            return []
        paths = self._search(start, end, _ExactLength(length))
        logger.debug(
            "paths of length %d %s -> %s: %d found", length, start, end, len(paths)
        )
        return paths

    def find_shortest_paths(
        self, start: str, end: str, strategy: ShortestStrategy = "dfs"
    ) -> list[list[str]]:
        """All simple paths from *start* to *end* with the fewest edges.

        ``dfs`` enumerates every simple path and keeps the minimal ones.
        ``bfs`` computes breadth-first distances first and only walks
        distance-increasing edges; it returns the same list in the same
        order at a lower cost.
        """
        if strategy == "bfs":
            paths = layered_shortest_paths(
                self._graph, start, end, sort_neighbors=self._neighbor_order == "sorted"
            )
        elif strategy == "dfs":
            paths = self._search(start, end, _Fewest())
        else:
            raise ValueError(f"Unknown shortest-path strategy: {strategy!r}")
        logger.debug(
            "shortest paths (%s) %s -> %s: %d found", strategy, start, end, len(paths)
        )
        return paths
