"""Human- and machine-readable rendering of search results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field

from edgepath_core.graph import LabeledGraph

QueryKind = Literal["all", "length", "shortest"]


class PathResult(BaseModel):
    """One path with the label of each edge along it."""

    nodes: list[str] = Field(min_length=1)
    labels: list[str | None] = Field(default_factory=list)

    @computed_field
    @property
    def edge_count(self) -> int:
        return len(self.nodes) - 1


class QueryReport(BaseModel):
    """Everything a query printed, for ``--format json``."""

    query: QueryKind
    start: str
    end: str
    length: int | None = None
    paths: list[PathResult] = Field(default_factory=list)

    @computed_field
    @property
    def count(self) -> int:
        return len(self.paths)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


def path_labels(path: list[str], graph: LabeledGraph) -> list[str | None]:
    return [graph.edge_label(u, v) for u, v in zip(path, path[1:])]


def format_path(path: list[str], graph: LabeledGraph) -> str:
    """Render ``A --- x ---> B --- y ---> C``."""
    parts = [
        f"{node} --- {label} ---> "
        for node, label in zip(path, path_labels(path, graph))
    ]
    parts.append(path[-1])
    return "".join(parts)


def path_results(paths: list[list[str]], graph: LabeledGraph) -> list[PathResult]:
    return [PathResult(nodes=p, labels=path_labels(p, graph)) for p in paths]
