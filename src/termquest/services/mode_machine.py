"""The single authority over which sub-system owns line input."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List

from termquest.core.scheduler import Scheduler
from termquest.core.types import Page
from termquest.domain.session import (
    ActiveMode,
    Mode,
    NormalMode,
    NoteEditMode,
    PuzzleMode,
    RaceMode,
    RpgMode,
    Session,
)
from termquest.services.apt_simulator import AptSimulator
from termquest.services.builtin_commands import build_main_command_table
from termquest.services.command_table import CommandContext, CommandTable
from termquest.services.content import CHALLENGE_BANNER
from termquest.services.note_session import NOTE_USAGE_MESSAGE, NoteEditSession
from termquest.services.output import TerminalOutput
from termquest.services.package_hunt import WELCOME_MESSAGE as PACKAGE_HUNT_WELCOME
from termquest.services.package_hunt import build_package_hunt_command_table
from termquest.services.puzzle_controller import ALREADY_ACTIVE_MESSAGE, PuzzleController
from termquest.services.race_engine import CommandRaceEngine
from termquest.services.results import LineResult
from termquest.services.rpg_engine import RPG_INTRO, RPGEngine

logger = logging.getLogger(__name__)

NAVIGATION_DELAY_SECONDS = 1.5
NOTHING_TO_QUIT_MESSAGE = "Nothing to quit. Type 'help' for available commands."
RPG_ALREADY_ACTIVE_MESSAGE = "The RPG is already running! Type 'quit' to leave it."
RACE_ALREADY_ACTIVE_MESSAGE = "A command race is already running! Type 'quit' to leave it."

_MODE_LABELS: Dict[Mode, str] = {
    Mode.PUZZLE: "puzzle",
    Mode.RPG: "RPG",
    Mode.RACE: "command race",
    Mode.NOTE_EDIT: "note editor",
}
_GAME_SWITCH_WORDS = ("quit", "puzzle", "rpg", "commandrace")


def _join(*parts: str) -> str:
    return "\n".join(part for part in parts if part)


class ModeStateMachine:
    """Routes submitted lines to the active mode and performs every transition.

    The active mode is one variant of ``Session.active``; entering a mode
    replaces the variant, so the transient state of the previous mode is
    dropped with it. Engines report what happened and this class decides
    whether that means a transition.
    """

    def __init__(
        self,
        *,
        session: Session,
        output: TerminalOutput,
        scheduler: Scheduler,
        puzzles: PuzzleController,
        rpg: RPGEngine,
        race: CommandRaceEngine,
        notes: NoteEditSession,
        apt: AptSimulator,
        tables: Dict[Page, CommandTable] | None = None,
        navigation_delay: float = NAVIGATION_DELAY_SECONDS,
    ) -> None:
        self._session = session
        self._output = output
        self._scheduler = scheduler
        self._puzzles = puzzles
        self._rpg = rpg
        self._race = race
        self._notes = notes
        self._tables: Dict[Page, CommandTable] = tables or {
            "main": build_main_command_table(),
            "package_hunt": build_package_hunt_command_table(),
        }
        self._navigation_delay = navigation_delay
        self._context = CommandContext(
            session=session,
            output=output,
            modes=self,
            puzzles=puzzles,
            notes=notes.store,
            apt=apt,
        )

    @property
    def mode(self) -> Mode:
        return self._session.mode

    @property
    def context(self) -> CommandContext:
        return self._context

    @property
    def prompt(self) -> str:
        """Prompt text for the active mode."""
        active = self._session.active
        if isinstance(active, NoteEditMode):
            return f"note:{active.title}> "
        if isinstance(active, RpgMode):
            return f"[HP {active.state.health}] {active.state.location} > "
        if isinstance(active, RaceMode):
            return "race> "
        if isinstance(active, PuzzleMode):
            return "user@computer:~/puzzle$ "
        if self._session.page == "package_hunt":
            return "user@ubuntu:~$ "
        return "user@computer:~$ "

    # -- line routing -------------------------------------------------------

    def submit_line(self, line: str) -> LineResult:
        """Hand a completed line to whichever mode owns input.

        A line whose handler cleared the screen drew its own page, so the
        result asks for no extra prompt.
        """
        active = self._session.active
        if isinstance(active, NoteEditMode):
            return self._handle_note_line(active, line)
        if isinstance(active, (RpgMode, RaceMode)):
            word = line.strip().lower()
            if word in _GAME_SWITCH_WORDS:
                return self._redrawing(lambda: self._run_switch_word(word))
            if isinstance(active, RpgMode):
                return self._handle_rpg_line(active, line)
            return self._handle_race_line(active, line)
        table = self._tables[self._session.page]
        return self._redrawing(lambda: table.execute(line, self._context))

    def _redrawing(self, run: Callable[[], str]) -> LineResult:
        clears = self._output.clears
        text = run()
        return LineResult(text, show_prompt=self._output.clears == clears)

    def _run_switch_word(self, word: str) -> str:
        if word == "quit":
            return self.quit()
        if word == "puzzle":
            return self.enter_puzzle()
        if word == "rpg":
            return self.enter_rpg()
        return self.enter_race()

    def _handle_note_line(self, active: NoteEditMode, line: str) -> LineResult:
        outcome = self._notes.handle(active, line)
        if outcome.finished:
            self._set_active(NormalMode())
        return LineResult(outcome.output)

    def _handle_rpg_line(self, active: RpgMode, line: str) -> LineResult:
        outcome = self._rpg.handle(active.state, line)
        if not outcome.died:
            return LineResult(outcome.output)
        self._set_active(NormalMode())
        return LineResult(_join(outcome.output, CHALLENGE_BANNER))

    def _handle_race_line(self, active: RaceMode, line: str) -> LineResult:
        state, result = self._race.handle(active.state, line)
        active.state = state
        return result

    # -- transitions --------------------------------------------------------

    def enter_puzzle(self) -> str:
        if self._puzzles.is_busy(self._session.active):
            return ALREADY_ACTIVE_MESSAGE
        notice = self._leave_current()
        mode = PuzzleMode()
        self._set_active(mode)
        return _join(notice, self._puzzles.begin_load(mode, self._on_puzzle_load_failed))

    def enter_rpg(self) -> str:
        if isinstance(self._session.active, RpgMode):
            return RPG_ALREADY_ACTIVE_MESSAGE
        notice = self._leave_current()
        self._output.clear()
        self._set_active(RpgMode(state=self._rpg.new_state()))
        return _join(notice, RPG_INTRO)

    def enter_race(self) -> str:
        if isinstance(self._session.active, RaceMode):
            return RACE_ALREADY_ACTIVE_MESSAGE
        notice = self._leave_current()
        self._output.clear()
        state = self._race.new_race()
        self._set_active(RaceMode(state=state))
        return _join(notice, self._race.intro(state))

    def enter_note(self, title: str) -> str:
        title = title.strip()
        if not title:
            return NOTE_USAGE_MESSAGE
        notice = self._leave_current()
        mode, text = self._notes.open(title)
        self._set_active(mode)
        return _join(notice, text)

    def quit(self) -> str:
        """Leave the active game and show the challenge menu."""
        active = self._session.active
        if isinstance(active, NormalMode):
            return NOTHING_TO_QUIT_MESSAGE
        full_screen = isinstance(active, (RpgMode, RaceMode))
        notice = self._leave_current()
        if full_screen:
            self._output.clear()
        return _join(notice, CHALLENGE_BANNER)

    def solve_puzzle(self, args: List[str]) -> str:
        text, solved = self._puzzles.check_answer(self._session.active, args)
        if solved:
            self._set_active(NormalMode())
            self._scheduler.call_later(
                self._navigation_delay, lambda: self.navigate("package_hunt")
            )
        return text

    def navigate(self, page: Page) -> None:
        """Switch the terminal to another page.

        A mode entered after the navigation was scheduled is left the usual
        way, so its exit notice shows on the new page and an open note keeps
        its unsaved lines.
        """
        notice = self._leave_current()
        self._session.page = page
        logger.debug("Navigated to page %s", page)
        self._output.clear()
        self._output.write(notice)
        if page == "package_hunt":
            self._output.write(PACKAGE_HUNT_WELCOME)

    def _on_puzzle_load_failed(self, mode: PuzzleMode) -> None:
        if self._session.active is mode:
            self._set_active(NormalMode())

    def _leave_current(self) -> str:
        """Tear down the active mode, returning the exit notice if any."""
        active = self._session.active
        if isinstance(active, NormalMode):
            return ""
        detail = self._teardown(active)
        self._set_active(NormalMode())
        return _join(f"Exiting {_MODE_LABELS[active.mode]}...", detail)

    def _teardown(self, active: ActiveMode) -> str:
        if isinstance(active, PuzzleMode):
            self._puzzles.teardown(active)
        elif isinstance(active, RaceMode):
            self._race.teardown(active.state)
        elif isinstance(active, NoteEditMode):
            return self._notes.close(active)
        return ""

    def _set_active(self, mode: ActiveMode) -> None:
        previous = self._session.active.mode
        self._session.active = mode
        self._session.prompt_visible = True
        logger.debug("Mode transition %s -> %s", previous.value, mode.mode.value)
