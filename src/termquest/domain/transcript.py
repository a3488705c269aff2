"""Bounded transcript of rendered terminal lines."""
from __future__ import annotations

from collections import deque
from typing import Deque, List, Protocol

DEFAULT_CAPACITY = 500


class OutputSink(Protocol):
    """Where terminal output goes."""

    def append(self, text: str) -> None:
        ...

    def clear(self) -> None:
        ...


class TranscriptListener(Protocol):
    def on_append(self, line: str) -> None:
        ...

    def on_clear(self) -> None:
        ...


class Transcript:
    """Append-only line buffer that evicts the oldest lines past capacity.

    Multi-line text is split so capacity counts rendered lines. A listener,
    when given, is told about every appended line and every clear.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        listener: TranscriptListener | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("Transcript capacity must be at least 1.")
        self._lines: Deque[str] = deque(maxlen=capacity)
        self._listener = listener

    @property
    def capacity(self) -> int:
        assert self._lines.maxlen is not None
        return self._lines.maxlen

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def append(self, text: str) -> None:
        for line in text.split("\n"):
            self._lines.append(line)
            if self._listener is not None:
                self._listener.on_append(line)

    def clear(self) -> None:
        self._lines.clear()
        if self._listener is not None:
            self._listener.on_clear()

    def text(self) -> str:
        return "\n".join(self._lines)
