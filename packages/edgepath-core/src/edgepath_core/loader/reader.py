"""Read ``SOURCE LABEL DESTINATION`` edge triples from text files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from edgepath_core.config.models import InputConfig
from edgepath_core.graph import Edge, LabeledGraph
from edgepath_core.loader.models import EdgeFileError

logger = logging.getLogger(__name__)


def parse_edge_line(
    line: str,
    line_number: int = 1,
    path: str = "<input>",
    comment_prefix: str = "#",
) -> Edge | None:
    """Parse one edge line.

    Returns None for blank and comment lines. Raises EdgeFileError when the
    line does not hold exactly three whitespace-separated tokens.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(comment_prefix):
        return None
    tokens = stripped.split()
    if len(tokens) != 3:
        raise EdgeFileError(
            path,
            f"expected 'SOURCE LABEL DESTINATION', got {len(tokens)} token(s): {stripped!r}",
            line_number=line_number,
        )
    source, label, destination = tokens
    return Edge(source=source, label=label, destination=destination)


def parse_edges(
    lines: Iterable[str],
    config: InputConfig | None = None,
    path: str = "<input>",
) -> list[Edge]:
    """Parse an iterable of edge lines, honouring ``skip_malformed``."""
    config = config or InputConfig()
    edges: list[Edge] = []
    for number, line in enumerate(lines, start=1):
        try:
            edge = parse_edge_line(line, number, path, config.comment_prefix)
        except EdgeFileError as e:
            if not config.skip_malformed:
                raise
            logger.warning("Skipping malformed line %s", e)
            continue
        if edge is not None:
            edges.append(edge)
    return edges


def read_edges(path: str | Path, config: InputConfig | None = None) -> list[Edge]:
    """Read all edges from the file at *path*."""
    config = config or InputConfig()
    path = Path(path)
    try:
        text = path.read_text(encoding=config.encoding)
    except FileNotFoundError as e:
        raise EdgeFileError(str(path), "file not found", cause=e) from e
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise EdgeFileError(str(path), f"cannot read file: {e}", cause=e) from e

    edges = parse_edges(text.splitlines(), config, str(path))
    logger.info("Read %d edge(s) from %s", len(edges), path)
    return edges


def load_graph(path: str | Path, config: InputConfig | None = None) -> LabeledGraph:
    """Build a LabeledGraph from an edge file."""
    graph = LabeledGraph.from_edges(read_edges(path, config))
    logger.debug("Loaded %r from %s", graph, path)
    return graph
