"""Read-only view state handed to the renderer."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemRow:
    """One displayed row: a node handle, its ranking key and its label."""

    node: int
    sort_key: int
    label: str


@dataclass(frozen=True)
class ViewSnapshot:
    """Immutable copy of the navigation state at one point in time.

    The renderer only ever sees this; it never touches the engine itself.
    """

    current: int
    items: tuple[ItemRow, ...]
    cursor: int
    history: tuple[int, ...]
    breadcrumbs: str = ""

    @property
    def selected(self) -> ItemRow | None:
        if 0 <= self.cursor < len(self.items):
            return self.items[self.cursor]
        return None
