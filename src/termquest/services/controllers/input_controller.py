"""Keystroke reducer that feeds completed lines to the mode state machine."""
from __future__ import annotations

from dataclasses import dataclass

from termquest.domain.session import Session
from termquest.services.mode_machine import ModeStateMachine
from termquest.services.output import TerminalOutput
from termquest.services.results import LineResult

INTERRUPT_MARKER = "^C"
EXIT_NOTICE = "logout\nThere is nowhere to log out to. Keep exploring!"
REVERSE_SEARCH_PLACEHOLDER = "(reverse-i-search)`': "


@dataclass(slots=True, frozen=True)
class KeyEvent:
    """A physical key press: a single character or a named key."""

    key: str
    ctrl: bool = False

    @property
    def is_printable(self) -> bool:
        return not self.ctrl and len(self.key) == 1 and self.key.isprintable()


class InputController:
    """
    Applies key presses to the session's line buffer.

    Responsibilities:
    - Edit the buffer (printable keys, Backspace, Ctrl shortcuts)
    - Walk the history with ArrowUp/ArrowDown
    - On Enter, echo the line, hand it to the state machine and write the output

    Ctrl shortcuts and Tab only apply in the command-shell modes. RPG, race
    and note editing keep every key for their own input.
    """

    def __init__(self, session: Session, machine: ModeStateMachine, output: TerminalOutput) -> None:
        self._session = session
        self._machine = machine
        self._output = output

    def handle_key(self, event: KeyEvent) -> LineResult | None:
        """Apply one key press; returns the line result when Enter was pressed."""
        if event.key == "Enter" and not event.ctrl:
            return self._submit()
        if event.key == "Backspace" and not event.ctrl:
            self._session.input_buffer = self._session.input_buffer[:-1]
            return None
        if event.key == "ArrowUp":
            self._history_up()
            return None
        if event.key == "ArrowDown":
            self._history_down()
            return None
        if event.is_printable:
            self._session.input_buffer += event.key
            return None
        if not self._session.in_command_shell:
            return None
        if event.key == "Tab" and not event.ctrl:
            self._cycle_highlight()
        elif event.ctrl:
            self._handle_ctrl(event.key.lower())
        return None

    def _submit(self) -> LineResult:
        session = self._session
        line = session.input_buffer
        self._output.write(f"{self._machine.prompt}{line}")
        session.push_history(line)
        session.input_buffer = ""
        result = self._machine.submit_line(line)
        self._output.write(result.output)
        if result.show_prompt:
            session.prompt_visible = True
        return result

    def _history_up(self) -> None:
        session = self._session
        if session.history_cursor > 0:
            session.history_cursor -= 1
            session.input_buffer = session.history[session.history_cursor]

    def _history_down(self) -> None:
        session = self._session
        last_index = len(session.history) - 1
        if session.history_cursor < last_index:
            session.history_cursor += 1
            session.input_buffer = session.history[session.history_cursor]
        elif session.history_cursor == last_index:
            session.history_cursor = len(session.history)
            session.input_buffer = ""

    def _cycle_highlight(self) -> None:
        session = self._session
        if not session.history:
            session.highlight_index = None
            return
        if session.highlight_index is None:
            session.highlight_index = len(session.history) - 1
        else:
            session.highlight_index = (session.highlight_index - 1) % len(session.history)

    def _handle_ctrl(self, key: str) -> None:
        session = self._session
        buffer = session.input_buffer
        if key in ("a", "k", "u"):
            session.input_buffer = ""
        elif key == "e":
            return
        elif key == "w":
            session.input_buffer = _delete_last_word(buffer)
        elif key == "c":
            if buffer:
                session.clipboard = buffer
            else:
                self._output.write(INTERRUPT_MARKER)
            session.input_buffer = ""
        elif key == "d":
            if not buffer:
                self._output.write(EXIT_NOTICE)
        elif key == "l":
            self._output.clear()
        elif key == "r":
            self._output.write(REVERSE_SEARCH_PLACEHOLDER)
        elif key == "t":
            if len(buffer) >= 2:
                session.input_buffer = buffer[:-2] + buffer[-1] + buffer[-2]
        elif key == "v":
            session.input_buffer = buffer + session.clipboard


def _delete_last_word(buffer: str) -> str:
    """Drop trailing whitespace and then the last whitespace-delimited word."""
    trimmed = buffer.rstrip()
    cut = max(trimmed.rfind(" "), trimmed.rfind("\t"))
    return trimmed[: cut + 1]
