from __future__ import annotations

import io
from contextlib import contextmanager

import pytest
from rich.console import Console

from stackview.tui.terminal import terminal_session


class _FakeInput:
    def __init__(self):
        self.log: list[str] = []

    @contextmanager
    def raw_mode(self):
        self.log.append("raw")
        try:
            yield
        finally:
            self.log.append("cooked")


def test_terminal_session_restores_raw_mode() -> None:
    inp = _FakeInput()
    console = Console(file=io.StringIO())

    with terminal_session(console, inp) as screen:
        assert inp.log == ["raw"]
        screen.update("hello")

    assert inp.log == ["raw", "cooked"]


def test_terminal_session_restores_on_error() -> None:
    inp = _FakeInput()
    console = Console(file=io.StringIO())

    with pytest.raises(OSError):
        with terminal_session(console, inp):
            raise OSError("draw failed")

    assert inp.log == ["raw", "cooked"]
    assert not console.is_alt_screen
