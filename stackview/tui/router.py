"""Browse loop and command registry for the TUI."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from .components import ACTIVE_STYLE, INFO_STYLE, render_view
from .events import InputKey

if TYPE_CHECKING:
    from rich.console import RenderableType

    from .events import Event, KeyEvents
    from .navigator import Navigator

logger = logging.getLogger(__name__)

QUIT = "quit"

# Key (character or prompt_toolkit key name) -> command name.
KEYMAP: dict[str, str] = {
    "q": QUIT,
    "j": "next",
    "down": "next",
    "k": "prev",
    "up": "prev",
    "l": "select",
    "right": "select",
    "c-m": "select",
    "h": "back",
    "left": "back",
}


class Router:
    """Main browse loop with command dispatch.

    Each iteration paints the current view, blocks for exactly one event
    and applies the matching command before painting again.
    """

    def __init__(
        self,
        nav: Navigator,
        events: KeyEvents,
        paint: Callable[[RenderableType], None],
        active_style: str = ACTIVE_STYLE,
        info_style: str = INFO_STYLE,
    ):
        """Initialize router with dependencies.

        Args:
            nav: Navigation engine to drive
            events: Blocking event source
            paint: Callback that puts a renderable on screen
            active_style: Style of the highlighted row
            info_style: Style of the other rows
        """
        self.nav = nav
        self.events = events
        self.paint = paint
        self.active_style = active_style
        self.info_style = info_style

    def render(self) -> None:
        self.paint(render_view(self.nav.snapshot(), active_style=self.active_style, info_style=self.info_style))

    def run(self) -> None:
        """Run the browse loop until the quit command is received.

        Errors from painting or reading events are not handled here.
        """
        while True:
            self.render()
            if self.dispatch(self.events.next()) == QUIT:
                logger.info("quit at node %d (depth %d)", self.nav.current, self.nav.depth())
                break

    def dispatch(self, event: Event) -> str | None:
        """Apply the command bound to `event`.

        Returns:
            The command name that was applied, or None for unbound input
        """
        if isinstance(event, InputKey):
            command = KEYMAP.get(event.key)
        else:
            command = None

        if command is None or command == QUIT:
            return command

        COMMANDS[command](self.nav)
        return command


# Command registry - maps command names to navigator actions
COMMANDS: dict[str, Callable[[Navigator], None]] = {}


def register_command(name: str):
    """Decorator to register a navigation command.

    Usage:
        @register_command("back")
        def _back(nav: Navigator) -> None:
            nav.back()
    """
    def decorator(fn: Callable[[Navigator], None]):
        COMMANDS[name] = fn
        return fn
    return decorator


@register_command("next")
def _next(nav: Navigator) -> None:
    nav.move_next()


@register_command("prev")
def _prev(nav: Navigator) -> None:
    nav.move_prev()


@register_command("select")
def _select(nav: Navigator) -> None:
    nav.select()


@register_command("back")
def _back(nav: Navigator) -> None:
    nav.back()
