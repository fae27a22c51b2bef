"""Reusable UI components for the browser and the CLI."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from rich.console import Console

    from .state import ViewSnapshot


# ═══════════════════════════════════════════════════════════════════════════════
# STYLING
# ═══════════════════════════════════════════════════════════════════════════════

ACTIVE_STYLE = "red"
INFO_STYLE = "grey70"
PANEL_TITLE = "List"


# ═══════════════════════════════════════════════════════════════════════════════
# NODE VIEW
# ═══════════════════════════════════════════════════════════════════════════════

def render_rows(
    snapshot: ViewSnapshot,
    active_style: str = ACTIVE_STYLE,
    info_style: str = INFO_STYLE,
) -> list[Text]:
    """One styled line per row; the row under the cursor is highlighted."""
    return [
        Text(row.label, style=active_style if i == snapshot.cursor else info_style, no_wrap=True)
        for i, row in enumerate(snapshot.items)
    ]


def render_view(
    snapshot: ViewSnapshot,
    active_style: str = ACTIVE_STYLE,
    info_style: str = INFO_STYLE,
) -> Panel:
    """Render the current node and its callees as a bordered "List" panel.

    Args:
        snapshot: View state to paint
        active_style: Style of the row under the cursor
        info_style: Style of every other row

    Returns:
        Panel that fills the available screen
    """
    rows = render_rows(snapshot, active_style=active_style, info_style=info_style)
    return Panel(
        Group(*rows),
        title=PANEL_TITLE,
        title_align="left",
        subtitle=Text(snapshot.breadcrumbs, style="dim") if snapshot.breadcrumbs else None,
        subtitle_align="left",
        expand=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# CLI OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
) -> None:
    """Render a friendly error panel with 3-part structure.

    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = f"[bold red]✗ {escape(title)}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {escape(cause)}\n"

    if action:
        content += f"\n[dim]→ {escape(action)}[/dim]"

    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()
