"""CLI entry point for Edgepath."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.syntax import Syntax
from rich.table import Table

from edgepath.config import DEFAULT_CONFIG_TEMPLATE, load_config
from edgepath.config.loader import CONFIG_FILENAME
from edgepath.log import configure_logging
from edgepath_core.config import EdgepathConfig
from edgepath_core.graph import LabeledGraph
from edgepath_core.loader import EdgeFileError, load_graph
from edgepath_core.output import QueryKind, QueryReport, format_path, path_results
from edgepath_core.search import PathSearchEngine

app = typer.Typer(
    name="edgepath",
    help="Find simple paths through a labeled directed graph.",
)

config_app = typer.Typer(help="Manage Edgepath configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: EdgepathConfig | None = None

_FORMATS = ("text", "json")
_STRATEGIES = ("dfs", "bfs")

# Error lines can carry user labels and file paths: no wrapping, no emoji codes.
_err = Console(soft_wrap=True, emoji=False)


def _get_config() -> EdgepathConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to edgepath.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        _err.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    level = "debug" if verbose else _config.log_level
    configure_logging(level, _config.log_format)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load(file: str, cfg: EdgepathConfig) -> LabeledGraph:
    try:
        return load_graph(file, cfg.input)
    except EdgeFileError as e:
        _err.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _require_labels(graph: LabeledGraph, start: str, end: str) -> None:
    if not graph.contains(start):
        _err.print(f"[red]Error:[/red] Starting node label not found in the graph: {escape(start)}")
        raise typer.Exit(1)
    if not graph.contains(end):
        _err.print(f"[red]Error:[/red] Ending node label not found in the graph: {escape(end)}")
        raise typer.Exit(1)


def _resolve_choice(value: str | None, default: str, choices: tuple[str, ...], name: str) -> str:
    chosen = value or default
    if chosen not in choices:
        _err.print(f"[red]Error:[/red] {name} must be one of: {', '.join(choices)}")
        raise typer.Exit(1)
    return chosen


def _print_paths(paths: list[list[str]], graph: LabeledGraph) -> None:
    """Print one rendered path per line, or a notice when there are none."""
    if not paths:
        rprint("[yellow]No paths found.[/yellow]")
        return
    for path in paths:
        typer.echo(format_path(path, graph))
    rprint(f"[dim]{len(paths)} path(s)[/dim]")


def _emit(
    query: QueryKind,
    paths: list[list[str]],
    graph: LabeledGraph,
    start: str,
    end: str,
    fmt: str,
    fail_on_empty: bool,
    length: int | None = None,
) -> None:
    if fmt == "json":
        report = QueryReport(
            query=query,
            start=start,
            end=end,
            length=length,
            paths=path_results(paths, graph),
        )
        typer.echo(report.to_json())
    else:
        _print_paths(paths, graph)
    if fail_on_empty and not paths:
        raise typer.Exit(1)


FileArg = Annotated[str, typer.Argument(help="Edge file with 'SOURCE LABEL DESTINATION' lines")]
StartArg = Annotated[str, typer.Argument(help="Starting node label")]
EndArg = Annotated[str, typer.Argument(help="Ending node label")]
FormatOpt = Annotated[
    str | None, typer.Option("--format", "-f", help="Output format: text or json")
]
FailOnEmptyOpt = Annotated[
    bool, typer.Option("--fail-on-empty", help="Exit 1 if no paths are found")
]


# ---------------------------------------------------------------------------
# Query commands
# ---------------------------------------------------------------------------


@app.command()
def paths(
    file: FileArg,
    start: StartArg,
    end: EndArg,
    format: FormatOpt = None,
    fail_on_empty: FailOnEmptyOpt = False,
) -> None:
    """Find all directed paths between START and END."""
    cfg = _get_config()
    fmt = _resolve_choice(format, cfg.output.format, _FORMATS, "--format")
    graph = _load(file, cfg)
    _require_labels(graph, start, end)

    engine = PathSearchEngine(graph, cfg.search.neighbor_order)
    found = engine.find_all_paths(start, end)
    _emit("all", found, graph, start, end, fmt, fail_on_empty)


@app.command()
def length(
    file: FileArg,
    start: StartArg,
    end: EndArg,
    count: Annotated[int, typer.Argument(min=0, help="Exact number of edges")],
    format: FormatOpt = None,
    fail_on_empty: FailOnEmptyOpt = False,
) -> None:
    """Find directed paths with exactly COUNT edges between START and END."""
    cfg = _get_config()
    fmt = _resolve_choice(format, cfg.output.format, _FORMATS, "--format")
    graph = _load(file, cfg)
    _require_labels(graph, start, end)

    engine = PathSearchEngine(graph, cfg.search.neighbor_order)
    found = engine.find_paths_of_length(start, end, count)
    _emit("length", found, graph, start, end, fmt, fail_on_empty, length=count)


@app.command()
def shortest(
    file: FileArg,
    start: StartArg,
    end: EndArg,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-s", help="dfs (exhaustive) or bfs (level-order)"),
    ] = None,
    format: FormatOpt = None,
    fail_on_empty: FailOnEmptyOpt = False,
) -> None:
    """Find the shortest directed path(s) between START and END."""
    cfg = _get_config()
    fmt = _resolve_choice(format, cfg.output.format, _FORMATS, "--format")
    how = _resolve_choice(strategy, cfg.search.shortest_strategy, _STRATEGIES, "--strategy")
    graph = _load(file, cfg)
    _require_labels(graph, start, end)

    engine = PathSearchEngine(graph, cfg.search.neighbor_order)
    found = engine.find_shortest_paths(start, end, how)
    _emit("shortest", found, graph, start, end, fmt, fail_on_empty)


@app.command()
def info(file: FileArg) -> None:
    """Summarize the nodes and edges of an edge file."""
    cfg = _get_config()
    graph = _load(file, cfg)

    rprint(Panel(
        f"[dim]File:[/dim]   {escape(file)}\n"
        f"[dim]Nodes:[/dim]  {len(graph)}\n"
        f"[dim]Edges:[/dim]  {graph.edge_count}",
        title="Graph",
        border_style="blue",
    ))

    table = Table(title=f"Edges ({graph.edge_count})")
    table.add_column("Source", style="cyan")
    table.add_column("Label", style="yellow")
    table.add_column("Destination", style="green")
    for edge in graph.edges():
        table.add_row(escape(edge.source), escape(edge.label), escape(edge.destination))
    rprint(table)


# ---------------------------------------------------------------------------
# Interactive shell
# ---------------------------------------------------------------------------

_MENU = """\
[bold]Queries:[/bold]

(1) - Find all directed paths between A and B
(2) - Find directed paths of a given length (edge count) between A and B
(3) - Find shortest directed path(s) with minimum number of edges
(q) - Quit program
"""


def _ask_edge_count() -> int | None:
    count = IntPrompt.ask("Enter your edge count")
    if count < 0:
        _err.print("[red]Error:[/red] Edge count must be non-negative.")
        return None
    return count


def _run_shell(graph: LabeledGraph, cfg: EdgepathConfig) -> None:
    start = Prompt.ask("Enter your starting node label").strip()
    end = Prompt.ask("Enter your ending node label").strip()
    _require_labels(graph, start, end)

    engine = PathSearchEngine(graph, cfg.search.neighbor_order)
    rprint(_MENU)
    while True:
        command = Prompt.ask("Enter a command").strip()
        if command == "1":
            _print_paths(engine.find_all_paths(start, end), graph)
        elif command == "2":
            count = _ask_edge_count()
            if count is not None:
                _print_paths(engine.find_paths_of_length(start, end, count), graph)
        elif command == "3":
            found = engine.find_shortest_paths(start, end, cfg.search.shortest_strategy)
            _print_paths(found, graph)
        elif command == "q":
            break
        else:
            rprint("[yellow]Invalid command. Try again.[/yellow]")


@app.command()
def shell(file: FileArg) -> None:
    """Load an edge file and answer path queries interactively."""
    cfg = _get_config()
    graph = _load(file, cfg)
    rprint(f"[bold]Loaded[/bold] {len(graph)} node(s), {graph.edge_count} edge(s).")
    try:
        _run_shell(graph, cfg)
    except (EOFError, KeyboardInterrupt):
        rprint()
    rprint("Exiting the program...")


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default edgepath.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
