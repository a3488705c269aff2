"""Composition root: one session wired to its engines and output."""
from __future__ import annotations

from functools import partial
from typing import Iterable

from termquest.core.rng import RNG
from termquest.core.scheduler import Scheduler
from termquest.data.notes_store import InMemoryNotesStore, NotesStore
from termquest.data.resource_loader import PuzzleResourceLoader, load_read_puzzle
from termquest.domain.session import Mode, Session
from termquest.domain.transcript import OutputSink
from termquest.services.apt_simulator import AptSimulator
from termquest.services.controllers.input_controller import InputController, KeyEvent
from termquest.services.mode_machine import NAVIGATION_DELAY_SECONDS, ModeStateMachine
from termquest.services.note_session import NoteEditSession
from termquest.services.output import TerminalOutput
from termquest.services.puzzle_controller import PuzzleController, PuzzleSource
from termquest.services.race_engine import RACE_CORPUS, CommandRaceEngine
from termquest.services.results import LineResult
from termquest.services.rpg_engine import RPGEngine


class Terminal:
    """A single terminal: key presses in, transcript lines out."""

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        sink: OutputSink | None = None,
        notes: NotesStore | None = None,
        loader: PuzzleResourceLoader | None = None,
        puzzle_source: PuzzleSource | None = None,
        rng: RNG | None = None,
        race_corpus: Iterable[str] = RACE_CORPUS,
        navigation_delay: float = NAVIGATION_DELAY_SECONDS,
    ) -> None:
        self.session = Session()
        self.sink = sink
        self.output = TerminalOutput(sink)
        self.scheduler = scheduler
        self.rng = rng or RNG.from_entropy()
        if puzzle_source is None:
            puzzle_source = partial(load_read_puzzle, loader or PuzzleResourceLoader())
        self.puzzles = PuzzleController(scheduler, puzzle_source, self.output)
        self.rpg = RPGEngine(self.rng)
        self.race = CommandRaceEngine(
            self.session, scheduler, self.output, self.rng, corpus=tuple(race_corpus)
        )
        self.notes = NoteEditSession(notes if notes is not None else InMemoryNotesStore())
        self.apt = AptSimulator()
        self.machine = ModeStateMachine(
            session=self.session,
            output=self.output,
            scheduler=scheduler,
            puzzles=self.puzzles,
            rpg=self.rpg,
            race=self.race,
            notes=self.notes,
            apt=self.apt,
            navigation_delay=navigation_delay,
        )
        self.input = InputController(self.session, self.machine, self.output)

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def prompt(self) -> str:
        return self.machine.prompt

    def press(self, key: str, *, ctrl: bool = False) -> LineResult | None:
        return self.input.handle_key(KeyEvent(key=key, ctrl=ctrl))

    def type_text(self, text: str) -> None:
        for char in text:
            self.press(char)

    def submit(self, line: str) -> LineResult:
        """Type ``line`` key by key and press Enter."""
        self.type_text(line)
        result = self.press("Enter")
        assert result is not None
        return result
