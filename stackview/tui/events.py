"""Input events delivered to the browse loop one at a time."""
from __future__ import annotations

import logging
import select
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Union

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

logger = logging.getLogger(__name__)

# Seconds to wait for the rest of a split escape sequence (prompt_toolkit's ttimeoutlen).
FLUSH_TIMEOUT = 0.5


@dataclass(frozen=True)
class InputKey:
    """A key press, as a single character ("j") or a prompt_toolkit key name ("up")."""

    key: str


# Only key presses for now; tick/resize would join this union.
Event = Union[InputKey]


class KeyEvents:
    """Blocking source of key events read from the terminal.

    Must be used while the input is in raw mode (see `terminal_session`).
    Keys that arrive together are queued and handed out one per call.
    """

    def __init__(self, inp: Input | None = None, flush_timeout: float = FLUSH_TIMEOUT):
        self.input = inp if inp is not None else create_input()
        self.flush_timeout = flush_timeout
        self._pending: deque[Event] = deque()

    def _queue(self, presses: list[KeyPress]) -> None:
        for press in presses:
            key = press.key.value if isinstance(press.key, Keys) else press.key
            self._pending.append(InputKey(key))

    def next(self) -> Event:
        """Block until the next event is available and return it.

        Raises:
            EOFError: The terminal input was closed
        """
        fd = self.input.fileno()
        while not self._pending:
            if self.input.closed:
                raise EOFError("terminal input closed")
            select.select([fd], [], [])
            self._queue(self.input.read_keys())
            # The parser may be holding the start of an escape sequence; only
            # flush it when the rest does not follow within the timeout.
            if not self._pending and not select.select([fd], [], [], self.flush_timeout)[0]:
                self._queue(self.input.flush_keys())
        event = self._pending.popleft()
        logger.debug("event %r", event)
        return event

    def __iter__(self) -> Iterator[Event]:
        while True:
            yield self.next()
