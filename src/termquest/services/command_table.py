"""Name-to-handler dispatch for the command-shell modes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Tuple

from termquest.data.notes_store import NotesStore
from termquest.domain.session import Session
from termquest.services.apt_simulator import AptSimulator
from termquest.services.output import TerminalOutput

if TYPE_CHECKING:
    from termquest.services.mode_machine import ModeStateMachine
    from termquest.services.puzzle_controller import PuzzleController


@dataclass(slots=True)
class CommandContext:
    """Everything a built-in command may read or ask to change."""

    session: Session
    output: TerminalOutput
    modes: "ModeStateMachine"
    puzzles: "PuzzleController"
    notes: NotesStore
    apt: AptSimulator


CommandHandler = Callable[[List[str], CommandContext], str]


def parse_command_line(line: str) -> Tuple[str, List[str]]:
    """Split a line into a lowercased command name and its arguments."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]


class CommandTable:
    """Case-insensitive mapping of command names to handlers."""

    def __init__(self, handlers: Dict[str, CommandHandler] | None = None) -> None:
        self._handlers: Dict[str, CommandHandler] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name.lower()] = handler

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._handlers

    def execute(self, line: str, context: CommandContext) -> str:
        """Run the command named by the first word of ``line``."""
        name, args = parse_command_line(line)
        if not name:
            return ""
        handler = self._handlers.get(name)
        if handler is None:
            return f"Command not found: {name}. Type 'help' for available commands."
        return handler(args, context)
