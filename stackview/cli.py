from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .graph import CallGraph, GraphError
from .loader import load_graph
from .logging import setup_logging
from .settings import Settings, load_settings
from .tui.components import render_error, render_view
from .tui.events import KeyEvents
from .tui.navigator import Navigator
from .tui.router import Router
from .tui.terminal import terminal_session

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="stackview: browse a call graph by worst-case stack usage",
    rich_markup_mode="rich",
)
console = Console()


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _resolve_root(cli_root: int | None, doc_root: int | None, settings: Settings) -> int:
    """Pick the starting node: --root, then the graph file, then STACKVIEW_ROOT."""
    if cli_root is not None:
        return cli_root
    if doc_root is not None:
        return doc_root
    return settings.STACKVIEW_ROOT


def _open_navigator(graph_path: Path, root: int | None, settings: Settings) -> Navigator:
    """Load the graph and open a navigator on the chosen root.

    Startup errors are rendered and turned into exit code 1.
    """
    try:
        graph, doc_root = load_graph(graph_path)
        start = _resolve_root(root, doc_root, settings)
        return Navigator(graph, start)
    except GraphError as e:
        logger.error("cannot open %s: %s", graph_path, e)
        render_error(
            console,
            "Cannot open call graph",
            str(e),
            action="Check the graph file and the --root option",
        )
        raise typer.Exit(code=1)


def _node_rows(graph: CallGraph, nav: Navigator) -> list[dict]:
    out: list[dict] = []
    for row in nav.items:
        node = graph.node(row.node)
        out.append(
            {
                "node": row.node,
                "name": node.name,
                "local": node.local,
                "max": node.max,
                "sort_key": row.sort_key,
                "label": row.label,
            }
        )
    return out


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("browse", help="[bold cyan]B[/bold cyan]rowse the call graph interactively")
def browse(
    graph_path: Path = typer.Argument(..., metavar="GRAPH", help="Call graph JSON file"),
    root: Optional[int] = typer.Option(None, "--root", "-r", help="Handle of the starting node"),
):
    """Open the full-screen browser.

    [bold]Keys:[/bold] j/↓ next, k/↑ previous, l/→/Enter descend, h/← back, q quit
    """
    s = load_settings()
    setup_logging(s)
    nav = _open_navigator(graph_path, root, s)

    events = KeyEvents()
    with terminal_session(console, events.input) as screen:
        router = Router(
            nav,
            events,
            paint=screen.update,
            active_style=s.STACKVIEW_ACTIVE_STYLE,
            info_style=s.STACKVIEW_INFO_STYLE,
        )
        router.run()


@app.command("show", help="[bold cyan]S[/bold cyan]how the ranked callees of one node")
def show(
    graph_path: Path = typer.Argument(..., metavar="GRAPH", help="Call graph JSON file"),
    root: Optional[int] = typer.Option(None, "--root", "-r", help="Handle of the node to show"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Print the rows the browser would display for a node, without entering full-screen mode."""
    s = load_settings()
    setup_logging(s, console=not json_out)
    nav = _open_navigator(graph_path, root, s)

    if json_out:
        payload = {"node": nav.current, "rows": _node_rows(nav.graph, nav)}
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    console.print(
        render_view(
            nav.snapshot(),
            active_style=s.STACKVIEW_INFO_STYLE,
            info_style=s.STACKVIEW_INFO_STYLE,
        )
    )
