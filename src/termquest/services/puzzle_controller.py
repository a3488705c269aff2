"""Reading puzzle: asynchronous loading, file listing and answer checking."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Tuple

from termquest.core.scheduler import Scheduler
from termquest.domain.puzzle import Puzzle
from termquest.domain.session import ActiveMode, PuzzleMode, PuzzlePhase
from termquest.services.content import format_output
from termquest.services.output import TerminalOutput

logger = logging.getLogger(__name__)

PuzzleSource = Callable[[], Awaitable[Puzzle]]

ALREADY_ACTIVE_MESSAGE = 'A puzzle is already active! Use "solve <answer>" to submit your answer.'
LOADING_MESSAGE = "Loading puzzle...\nPlease wait..."
NO_PUZZLE_MESSAGE = 'No puzzle is active! Type "puzzle" to start one.'
MISSING_OPERAND_MESSAGE = 'cat: missing file operand\nTry "ls" to see available files.'
SOLVE_USAGE_MESSAGE = "Usage: solve <answer>\nExample: solve FIT3146SECRET"
CORRECT_MESSAGE = "✓ Correct! Well done!\nRedirecting to next page..."
WRONG_MESSAGE = (
    "✗ Wrong! Try reading all the clue files carefully.\n"
    "Hint: Combine the parts you find in the correct order."
)

DECOY_LISTING = format_output(
    [
        "total 8",
        "drwxr-xr-x  2 user user 4096 Jan  1 12:00 .",
        "drwxr-xr-x  3 user user 4096 Jan  1 12:00 ..",
        "-rw-r--r--  1 user user  220 Jan  1 12:00 .bashrc",
        "-rw-r--r--  1 user user 3526 Jan  1 12:00 .bash_history",
    ]
)


class PuzzleController:
    """Drives the NONE -> LOADING -> ACTIVE -> SOLVED lifecycle of a puzzle.

    The lifecycle state itself lives on the ``PuzzleMode`` held by the
    session, so tearing the mode down is enough to invalidate a load that is
    still in flight: the completion callback only applies its result while
    the mode it was started for is still LOADING.
    """

    def __init__(self, scheduler: Scheduler, source: PuzzleSource, output: TerminalOutput) -> None:
        self._scheduler = scheduler
        self._source = source
        self._output = output

    @staticmethod
    def phase(active: ActiveMode) -> PuzzlePhase:
        if isinstance(active, PuzzleMode):
            return active.phase
        return PuzzlePhase.NONE

    def is_busy(self, active: ActiveMode) -> bool:
        """LOADING counts as busy so a second load can never start."""
        return self.phase(active) in (PuzzlePhase.LOADING, PuzzlePhase.ACTIVE)

    def begin_load(self, mode: PuzzleMode, on_failure: Callable[[PuzzleMode], None]) -> str:
        """Start fetching the puzzle for ``mode`` and return the placeholder text."""
        mode.phase = PuzzlePhase.LOADING
        mode.puzzle = None

        def _on_done(result: Puzzle | None, exc: BaseException | None) -> None:
            self._finish_load(mode, result, exc, on_failure)

        self._scheduler.submit(self._source, _on_done)
        logger.debug("Puzzle load started")
        return LOADING_MESSAGE

    def _finish_load(
        self,
        mode: PuzzleMode,
        puzzle: Puzzle | None,
        exc: BaseException | None,
        on_failure: Callable[[PuzzleMode], None],
    ) -> None:
        if mode.phase is not PuzzlePhase.LOADING:
            logger.debug("Ignoring puzzle load completion for a torn-down puzzle")
            return
        if exc is not None or puzzle is None:
            logger.error("Failed to load puzzle: %s", exc)
            mode.phase = PuzzlePhase.NONE
            on_failure(mode)
            return
        mode.puzzle = puzzle
        mode.phase = PuzzlePhase.ACTIVE
        logger.debug("Puzzle loaded with %d files", len(puzzle.files))
        self._output.write(
            format_output(
                [
                    "=== Reading Puzzle ===",
                    puzzle.description,
                    "Use: solve <answer>",
                ]
            )
        )

    @staticmethod
    def teardown(mode: PuzzleMode) -> None:
        mode.phase = PuzzlePhase.NONE
        mode.puzzle = None

    @staticmethod
    def _active_puzzle(active: ActiveMode) -> Puzzle | None:
        if isinstance(active, PuzzleMode) and active.phase is PuzzlePhase.ACTIVE:
            return active.puzzle
        return None

    def list_files(self, active: ActiveMode) -> str:
        puzzle = self._active_puzzle(active)
        if puzzle is None:
            return DECOY_LISTING
        lines: List[str] = ["total 8"]
        for puzzle_file in puzzle.files:
            size = len(puzzle_file.content)
            lines.append(f"-rw-r--r--  1 user user {size:>4} Jan  1 12:00 {puzzle_file.name}")
        return format_output(lines)

    def read_file(self, active: ActiveMode, args: List[str]) -> str:
        puzzle = self._active_puzzle(active)
        if puzzle is None:
            return NO_PUZZLE_MESSAGE
        if not args or not args[0]:
            return MISSING_OPERAND_MESSAGE
        name = args[0]
        puzzle_file = puzzle.find_file(name)
        if puzzle_file is None:
            return f"cat: {name}: No such file or directory"
        return puzzle_file.content

    def check_answer(self, active: ActiveMode, args: List[str]) -> Tuple[str, bool]:
        """Return the response text and whether the puzzle was just solved."""
        puzzle = self._active_puzzle(active)
        if puzzle is None:
            return NO_PUZZLE_MESSAGE, False
        answer = "".join(args).lower()
        if not answer:
            return SOLVE_USAGE_MESSAGE, False
        if answer != puzzle.answer:
            return WRONG_MESSAGE, False
        assert isinstance(active, PuzzleMode)
        active.phase = PuzzlePhase.SOLVED
        return CORRECT_MESSAGE, True
