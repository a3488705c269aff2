"""Session state: the single mutable root of a terminal."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Union

from termquest.core.types import Page
from termquest.domain.puzzle import Puzzle
from termquest.domain.race_state import RaceState
from termquest.domain.rpg_state import RPGState


class Mode(Enum):
    """Tag naming the sub-system that owns line input."""

    NORMAL = "normal"
    PUZZLE = "puzzle"
    RPG = "rpg"
    RACE = "race"
    NOTE_EDIT = "note_edit"


class PuzzlePhase(Enum):
    NONE = "none"
    LOADING = "loading"
    ACTIVE = "active"
    SOLVED = "solved"


@dataclass(slots=True)
class NormalMode:
    mode: ClassVar[Mode] = Mode.NORMAL


@dataclass(slots=True)
class PuzzleMode:
    """Reading puzzle in progress; the puzzle is absent while loading."""

    mode: ClassVar[Mode] = Mode.PUZZLE
    phase: PuzzlePhase = PuzzlePhase.LOADING
    puzzle: Puzzle | None = None


@dataclass(slots=True)
class RpgMode:
    mode: ClassVar[Mode] = Mode.RPG
    state: RPGState = field(default_factory=RPGState)


@dataclass(slots=True)
class RaceMode:
    mode: ClassVar[Mode] = Mode.RACE
    state: RaceState


@dataclass(slots=True)
class NoteEditMode:
    """Working copy of a note being edited."""

    mode: ClassVar[Mode] = Mode.NOTE_EDIT
    note_id: str
    title: str
    buffer: List[str] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "".join(self.buffer)


ActiveMode = Union[NormalMode, PuzzleMode, RpgMode, RaceMode, NoteEditMode]

COMMAND_SHELL_MODES = (Mode.NORMAL, Mode.PUZZLE)


@dataclass(slots=True)
class Session:
    """Line buffer, history and the active mode of one terminal."""

    input_buffer: str = ""
    history: List[str] = field(default_factory=list)
    history_cursor: int = 0
    active: ActiveMode = field(default_factory=NormalMode)
    clipboard: str = ""
    highlight_index: int | None = None
    prompt_visible: bool = True
    page: Page = "main"

    @property
    def mode(self) -> Mode:
        return self.active.mode

    @property
    def in_command_shell(self) -> bool:
        """True when lines go through the command table and Ctrl keys are live."""
        return self.mode in COMMAND_SHELL_MODES

    def push_history(self, line: str) -> None:
        """Record a submitted line and park the cursor past the end."""
        if line.strip():
            self.history.append(line)
        self.history_cursor = len(self.history)
        self.highlight_index = None
