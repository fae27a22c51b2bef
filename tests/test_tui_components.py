from __future__ import annotations

from rich.console import Console

from stackview.tui.components import render_error, render_rows, render_view
from stackview.tui.navigator import Navigator


def _text(renderable) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_render_view_titled_list_panel(abcde_graph) -> None:
    nav = Navigator(abcde_graph, 0)

    out = _text(render_view(nav.snapshot()))

    assert "List" in out.splitlines()[0]
    for row in nav.items:
        assert row.label.strip() in out


def test_render_view_shows_path(abcde_graph) -> None:
    nav = Navigator(abcde_graph, 0)
    nav.move_next()
    nav.select()

    out = _text(render_view(nav.snapshot()))

    assert "A > B" in out


def test_render_rows_highlights_cursor(abcde_graph) -> None:
    nav = Navigator(abcde_graph, 0)
    nav.move_next()

    rows = render_rows(nav.snapshot(), active_style="bold red", info_style="dim")

    assert [str(r.style) for r in rows] == ["dim", "bold red", "dim", "dim"]


def test_render_error_escapes_markup() -> None:
    console = Console(record=True, width=100, color_system=None)

    render_error(console, "Cannot open call graph", "bad value [type=int_parsing]", action="Fix it")

    out = console.export_text()
    assert "Cannot open call graph" in out
    assert "[type=int_parsing]" in out
    assert "Fix it" in out
