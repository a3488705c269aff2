"""Command race: type a shell command exactly, as fast as possible."""
from __future__ import annotations

import logging
from typing import Sequence

from termquest.core.rng import RNG
from termquest.core.scheduler import Scheduler
from termquest.domain.race_state import RacePhase, RaceResult, RaceState
from termquest.domain.session import Session
from termquest.services.content import format_output
from termquest.services.output import TerminalOutput
from termquest.services.results import LineResult

logger = logging.getLogger(__name__)

RACE_CORPUS: tuple[str, ...] = (
    "ls -la",
    "cd /var/log",
    "grep -r 'error' /var/log",
    "chmod 755 deploy.sh",
    "tar -xzf archive.tar.gz",
    "find . -name '*.py'",
    "mkdir -p projects/demo",
    "cp notes.txt backup/notes.txt",
    "ps aux | grep python",
    "sudo apt install git",
    "echo $HOME",
    "tail -n 20 app.log",
)

COUNTDOWN_SECONDS = 3
COUNTDOWN_INTERVAL = 1.0
MIN_ELAPSED_SECONDS = 0.1


def compute_result(target_text: str, elapsed_seconds: float) -> RaceResult:
    """Score a finished race; elapsed time is clamped away from zero."""
    elapsed = max(elapsed_seconds, MIN_ELAPSED_SECONDS)
    words = len(target_text.split())
    chars = len(target_text)
    return RaceResult(
        elapsed_seconds=elapsed_seconds,
        wpm=round(words / elapsed * 60),
        cpm=round(chars / elapsed * 60),
    )


class CommandRaceEngine:
    """Runs the WAITING -> COUNTDOWN -> RACING -> FINISHED race loop.

    Every race gets a fresh epoch. ``teardown`` cancels the pending countdown
    timer and retires the epoch, so a tick that still fires afterwards sees a
    mismatched epoch and does nothing.
    """

    def __init__(
        self,
        session: Session,
        scheduler: Scheduler,
        output: TerminalOutput,
        rng: RNG,
        corpus: Sequence[str] = RACE_CORPUS,
    ) -> None:
        if not corpus:
            raise ValueError("Race corpus must not be empty.")
        self._session = session
        self._scheduler = scheduler
        self._output = output
        self._rng = rng
        self._corpus = tuple(corpus)
        self._epoch = 0

    def new_race(self) -> RaceState:
        self._epoch += 1
        return RaceState(target_text=self._rng.choice(self._corpus), epoch=self._epoch)

    def intro(self, state: RaceState) -> str:
        return format_output(
            [
                "=== Command Race ===",
                "Type the command exactly as shown, as fast as you can.",
                f"Your command: {state.target_text}",
                "Type 'start' when ready, or 'quit' to leave.",
            ]
        )

    def teardown(self, state: RaceState) -> None:
        state.cancel_countdown()
        self._epoch += 1
        self._session.prompt_visible = True

    def handle(self, state: RaceState, line: str) -> tuple[RaceState, LineResult]:
        """Handle one line; returns the (possibly replaced) state and the result."""
        if state.phase is RacePhase.WAITING:
            if line.strip().lower() == "start":
                return state, self._start_countdown(state)
            return state, LineResult(f"You typed '{line}'. Type 'start' to begin or 'quit' to leave.")
        if state.phase is RacePhase.COUNTDOWN:
            return state, LineResult("Please wait for the countdown to finish...", show_prompt=False)
        if state.phase is RacePhase.RACING:
            return state, LineResult(self._check_attempt(state, line))
        command = line.strip().lower()
        if command in ("play again", "playagain"):
            self.teardown(state)
            replacement = self.new_race()
            return replacement, LineResult(self.intro(replacement))
        return state, LineResult("Type 'play again' for another race or 'quit' to leave.")

    def _start_countdown(self, state: RaceState) -> LineResult:
        state.phase = RacePhase.COUNTDOWN
        state.countdown_remaining = COUNTDOWN_SECONDS
        self._session.prompt_visible = False
        self._schedule_tick(state)
        return LineResult(f"Get ready...\n{COUNTDOWN_SECONDS}", show_prompt=False)

    def _schedule_tick(self, state: RaceState) -> None:
        epoch = state.epoch

        def _tick() -> None:
            self._on_tick(state, epoch)

        state.countdown_handle = self._scheduler.call_later(COUNTDOWN_INTERVAL, _tick)

    def _on_tick(self, state: RaceState, epoch: int) -> None:
        if epoch != self._epoch or state.phase is not RacePhase.COUNTDOWN:
            logger.debug("Dropping stale countdown tick for epoch %d", epoch)
            return
        state.countdown_handle = None
        state.countdown_remaining -= 1
        if state.countdown_remaining > 0:
            self._output.write(str(state.countdown_remaining))
            self._schedule_tick(state)
            return
        state.phase = RacePhase.RACING
        state.start_timestamp = self._scheduler.now()
        self._session.prompt_visible = True
        self._output.write(f"GO!\nType: {state.target_text}")

    def _check_attempt(self, state: RaceState, line: str) -> str:
        if line != state.target_text:
            return format_output(
                [
                    "✗ Not quite! Keep trying.",
                    f"You typed: {line}",
                    f"Expected:  {state.target_text}",
                ]
            )
        assert state.start_timestamp is not None
        elapsed = self._scheduler.now() - state.start_timestamp
        result = compute_result(state.target_text, elapsed)
        state.result = result
        state.phase = RacePhase.FINISHED
        logger.debug("Race finished in %.2fs", elapsed)
        return format_output(
            [
                "🏁 Finished!",
                f"Time: {result.elapsed_seconds:.2f}s",
                f"WPM: {result.wpm}",
                f"CPM: {result.cpm}",
                "Type 'play again' for another race or 'quit' to leave.",
            ]
        )
