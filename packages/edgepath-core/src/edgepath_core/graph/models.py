"""Data models for the labeled graph store."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass
class Node:
    """A graph vertex identified by its label.

    ``neighbors`` holds the labels of outgoing neighbors, keyed into the
    owning graph's node table. A dict is used as an insertion-ordered set.
    """

    label: str
    neighbors: dict[str, None] = field(default_factory=dict)

    def add_neighbor(self, label: str) -> None:
        self.neighbors.setdefault(label, None)


class Edge(BaseModel):
    """A directed, labeled edge between two node labels."""

    model_config = ConfigDict(frozen=True)

    source: str
    label: str
    destination: str

    @field_validator("source", "label", "destination")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("edge fields must be non-empty")
        return v
