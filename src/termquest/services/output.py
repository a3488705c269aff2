"""Null-safe writer in front of the output sink."""
from __future__ import annotations

from termquest.domain.transcript import OutputSink


class TerminalOutput:
    """Forwards writes to a sink; every call is a no-op without one.

    ``clears`` counts screen clears, sink or not, so callers can tell that a
    command redrew the screen itself.
    """

    def __init__(self, sink: OutputSink | None) -> None:
        self._sink = sink
        self._clears = 0

    @property
    def attached(self) -> bool:
        return self._sink is not None

    @property
    def clears(self) -> int:
        return self._clears

    def write(self, text: str) -> None:
        if not text or self._sink is None:
            return
        self._sink.append(text)

    def clear(self) -> None:
        self._clears += 1
        if self._sink is None:
            return
        self._sink.clear()
