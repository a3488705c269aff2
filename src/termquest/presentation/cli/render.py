"""Console rendering of the terminal transcript."""
from __future__ import annotations

import sys
from typing import List, TextIO

from termquest.domain.session import Session

_CLEAR_SCREEN = "\033[2J\033[H"


class ConsoleView:
    """Transcript listener that prints lines as they arrive.

    The line the user just typed is already on screen, so the echo the
    terminal writes for it is swallowed once.
    """

    def __init__(self, stream: TextIO | None = None, *, ansi: bool = True) -> None:
        self._stream = stream or sys.stdout
        self._ansi = ansi
        self._pending_echo: List[str] = []

    def expect_echo(self, line: str) -> None:
        self._pending_echo.append(line)

    def on_append(self, line: str) -> None:
        if self._pending_echo and self._pending_echo[0] == line:
            self._pending_echo.pop(0)
            return
        self._stream.write(f"{line}\n")
        self._stream.flush()

    def on_clear(self) -> None:
        self._pending_echo.clear()
        if self._ansi:
            self._stream.write(_CLEAR_SCREEN)
        else:
            self._stream.write("\n")
        self._stream.flush()


def render_highlight(session: Session) -> str | None:
    """Return the history entry Tab has highlighted, if any."""
    if session.highlight_index is None or not session.history:
        return None
    return f"  ▶ {session.history[session.highlight_index]}"
