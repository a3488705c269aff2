"""Line-buffered note editing."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from termquest.data.notes_store import NotesStore
from termquest.domain.session import NoteEditMode

logger = logging.getLogger(__name__)

SAVE_WORD = "save"
CANCEL_WORD = "cancel"
NOTE_USAGE_MESSAGE = "Usage: note <title>\nExample: note linux-tips"


@dataclass(slots=True)
class NoteOutcome:
    output: str
    finished: bool = False


class NoteEditSession:
    """Opens notes for editing and applies each submitted line to the buffer."""

    def __init__(self, store: NotesStore) -> None:
        self._store = store

    @property
    def store(self) -> NotesStore:
        return self._store

    def open(self, title: str) -> tuple[NoteEditMode, str]:
        """Return an edit mode for ``title``, creating the note when needed."""
        note = self._store.find_by_title(title)
        created = note is None
        if note is None:
            note = self._store.create(title)
        buffer: List[str] = [note.content] if note.content else []
        mode = NoteEditMode(note_id=note.id, title=note.title, buffer=buffer)
        verb = "Created" if created else "Editing"
        lines = [f"{verb} note '{note.title}'."]
        if note.content:
            lines.append("Current content:")
            lines.append(note.content.rstrip("\n"))
        lines.append(f"Type lines to add them. '{SAVE_WORD}' to save, '{CANCEL_WORD}' to discard.")
        return mode, "\n".join(lines)

    def handle(self, mode: NoteEditMode, line: str) -> NoteOutcome:
        word = line.strip().lower()
        if word == SAVE_WORD:
            self._store.update_content(mode.note_id, mode.content)
            logger.debug("Saved note %s", mode.note_id)
            mode.buffer = []
            return NoteOutcome(f"Note '{mode.title}' saved.", finished=True)
        if word == CANCEL_WORD:
            mode.buffer = []
            return NoteOutcome(f"Changes to '{mode.title}' discarded.", finished=True)
        mode.buffer.append(f"{line}\n")
        return NoteOutcome("")

    def close(self, mode: NoteEditMode) -> str:
        """Keep unsaved lines when the editor is torn down from outside."""
        note = self._store.get(mode.note_id)
        content = mode.content
        mode.buffer = []
        if content == note.content:
            return ""
        self._store.update_content(mode.note_id, content)
        logger.debug("Saved note %s on forced close", mode.note_id)
        return f"Note '{mode.title}' saved."
