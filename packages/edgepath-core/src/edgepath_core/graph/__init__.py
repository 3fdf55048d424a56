"""Labeled directed graph store."""

from edgepath_core.graph.models import Edge, Node
from edgepath_core.graph.store import LabeledGraph

__all__ = [
    "Edge",
    "LabeledGraph",
    "Node",
]
