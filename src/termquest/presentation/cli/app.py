"""Console-driven UI loop for Terminal Quest."""
from __future__ import annotations

import asyncio
import logging
import queue
import threading
from pathlib import Path
from typing import Any, Dict

from termquest.core.rng import RNG
from termquest.core.scheduler import AsyncioScheduler
from termquest.data.errors import NoteStoreError
from termquest.data.notes_store import InMemoryNotesStore, JsonNotesStore, NotesStore
from termquest.data.resource_loader import PuzzleResourceLoader
from termquest.domain.transcript import Transcript
from termquest.presentation.cli.render import ConsoleView, render_highlight
from termquest.services.content import WELCOME_MESSAGE
from termquest.services.terminal import Terminal

logger = logging.getLogger(__name__)

# "^L" on its own line stands in for Ctrl+L, which a cooked terminal swallows.
_CTRL_ESCAPE_KEYS = frozenset("acdeklrtuvw")


def run(settings: Dict[str, Any]) -> None:
    """Run the interactive session until EOF or Ctrl+C."""
    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        pass
    print("Goodbye!")


def _build_notes_store(settings: Dict[str, Any]) -> NotesStore:
    try:
        return JsonNotesStore(Path(settings["notes_path"]))
    except NoteStoreError as exc:
        logger.error("Notes unavailable, keeping them in memory for this session: %s", exc)
        return InMemoryNotesStore()


def build_terminal(settings: Dict[str, Any], view: ConsoleView) -> Terminal:
    """Assemble a terminal bound to the running event loop."""
    return Terminal(
        scheduler=AsyncioScheduler(),
        sink=Transcript(capacity=settings["transcript_capacity"], listener=view),
        notes=_build_notes_store(settings),
        loader=PuzzleResourceLoader(settings.get("puzzles_path")),
        rng=RNG.from_entropy(),
    )


def feed_line(terminal: Terminal, view: ConsoleView, raw: str) -> None:
    """Translate one console line into key presses."""
    if len(raw) == 2 and raw[0] == "^" and raw[1].lower() in _CTRL_ESCAPE_KEYS:
        terminal.press(raw[1].lower(), ctrl=True)
        return
    for char in raw:
        if char == "\t":
            terminal.press("Tab")
            highlight = render_highlight(terminal.session)
            if highlight:
                print(highlight)
        else:
            terminal.press(char)
    view.expect_echo(f"{terminal.prompt}{terminal.session.input_buffer}")
    terminal.press("Enter")


class StdinReader:
    """Reads console lines on a daemon thread and hands them to the loop.

    The thread never joins the event loop's executor, so Ctrl+C can end the
    loop while ``input`` is still blocked. ``readline`` returns None at EOF.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._prompts: "queue.Queue[str]" = queue.Queue()
        self._lines: "asyncio.Queue[str | None]" = asyncio.Queue()
        self.thread = threading.Thread(target=self._read_forever, name="termquest-stdin", daemon=True)
        self.thread.start()

    async def readline(self, prompt: str) -> str | None:
        self._prompts.put(prompt)
        return await self._lines.get()

    def _read_forever(self) -> None:
        while True:
            prompt = self._prompts.get()
            try:
                line: str | None = input(prompt)
            except EOFError:
                line = None
            try:
                self._loop.call_soon_threadsafe(self._lines.put_nowait, line)
            except RuntimeError:
                # loop already closed
                return
            if line is None:
                return


async def _run(settings: Dict[str, Any]) -> None:
    view = ConsoleView()
    terminal = build_terminal(settings, view)
    terminal.output.write(WELCOME_MESSAGE)
    reader = StdinReader(asyncio.get_running_loop())
    while True:
        prompt = terminal.prompt if terminal.session.prompt_visible else ""
        raw = await reader.readline(prompt)
        if raw is None:
            terminal.press("d", ctrl=True)
            return
        feed_line(terminal, view, raw)
