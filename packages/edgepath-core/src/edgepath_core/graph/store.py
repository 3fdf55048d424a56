"""In-memory directed graph with one label per ordered node pair."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from edgepath_core.graph.models import Edge, Node

logger = logging.getLogger(__name__)


class LabeledGraph:
    """Directed, possibly cyclic graph keyed by node label.

    Nodes are created on first mention by :meth:`insert_edge` and are never
    removed. Edge labels live in a nested map ``source -> destination -> label``
    so a second insertion for the same ordered pair overwrites the label.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edge_labels: dict[str, dict[str, str]] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> LabeledGraph:
        graph = cls()
        for edge in edges:
            graph.add_edge(edge)
        return graph

    def _node_for(self, label: str) -> Node:
        node = self._nodes.get(label)
        if node is None:
            node = Node(label)
            self._nodes[label] = node
        return node

    def insert_edge(self, source: str, destination: str, label: str) -> None:
        """Add a directed edge, creating either endpoint if it is new."""
        source_node = self._node_for(source)
        self._node_for(destination)
        source_node.add_neighbor(destination)

        labels = self._edge_labels.setdefault(source, {})
        previous = labels.get(destination)
        if previous is not None and previous != label:
            logger.debug(
                "Overwriting label %r -> %r for edge %s -> %s",
                previous, label, source, destination,
            )
        labels[destination] = label

    def add_edge(self, edge: Edge) -> None:
        self.insert_edge(edge.source, edge.destination, edge.label)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def edge_label(self, node1: str, node2: str) -> str | None:
        """Return the label of the edge node1 -> node2, or None if absent."""
        labels = self._edge_labels.get(node1)
        if labels is None:
            return None
        return labels.get(node2)

    def contains(self, label: str) -> bool:
        return label in self._nodes

    def get_node(self, label: str) -> Node | None:
        return self._nodes.get(label)

    def neighbors(self, label: str) -> list[str]:
        """Outgoing neighbor labels in insertion order (empty if unknown)."""
        node = self._nodes.get(label)
        if node is None:
            return []
        return list(node.neighbors)

    @property
    def labels(self) -> list[str]:
        return list(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._edge_labels.values())

    def edges(self) -> list[Edge]:
        """All edges, grouped by source in node insertion order."""
        result: list[Edge] = []
        for source, node in self._nodes.items():
            labels = self._edge_labels.get(source, {})
            for destination in node.neighbors:
                result.append(
                    Edge(source=source, label=labels[destination], destination=destination)
                )
        return result

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"LabeledGraph(nodes={len(self)}, edges={self.edge_count})"
