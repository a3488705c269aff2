"""Command race state tracking."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from termquest.core.scheduler import TimerHandle


class RacePhase(Enum):
    WAITING = "waiting"
    COUNTDOWN = "countdown"
    RACING = "racing"
    FINISHED = "finished"


@dataclass(slots=True)
class RaceResult:
    """Scores for a finished race."""

    elapsed_seconds: float
    wpm: int
    cpm: int


@dataclass(slots=True)
class RaceState:
    """State of one command race, from waiting room to results."""

    target_text: str
    epoch: int
    phase: RacePhase = RacePhase.WAITING
    start_timestamp: float | None = None
    countdown_remaining: int = 0
    countdown_handle: TimerHandle | None = None
    result: RaceResult | None = None

    def cancel_countdown(self) -> None:
        if self.countdown_handle is not None:
            self.countdown_handle.cancel()
            self.countdown_handle = None
