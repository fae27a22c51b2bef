"""Full-screen terminal session for the browser."""
from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from prompt_toolkit.input import Input
    from rich.console import Console, ScreenContext

logger = logging.getLogger(__name__)


@contextmanager
def terminal_session(console: Console, inp: Input) -> Iterator[ScreenContext]:
    """Enter raw input mode and the alternate screen for the duration of the block.

    Both are restored on every exit path, including exceptions raised while
    drawing or reading input.

    Args:
        console: Rich Console that paints the view
        inp: prompt_toolkit input to switch into raw mode

    Yields:
        The rich screen context; call `update()` on it to repaint
    """
    with ExitStack() as stack:
        stack.enter_context(inp.raw_mode())
        screen = stack.enter_context(console.screen(hide_cursor=True))
        logger.debug("terminal session started")
        try:
            yield screen
        finally:
            logger.debug("terminal session restored")
