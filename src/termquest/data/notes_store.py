"""Note persistence collaborators."""
from __future__ import annotations

import json
import uuid
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Protocol

from termquest.data.errors import NoteStoreError
from termquest.domain.note import Note, utc_timestamp


class NotesStore(Protocol):
    """What the note editor needs from storage."""

    def find_by_title(self, title: str) -> Note | None:
        ...

    def create(self, title: str) -> Note:
        ...

    def get(self, note_id: str) -> Note:
        ...

    def update_content(self, note_id: str, content: str) -> Note:
        ...

    def list_notes(self) -> List[Note]:
        ...


class InMemoryNotesStore:
    """Dict-backed store; also the base for the JSON store."""

    def __init__(self) -> None:
        self._notes: Dict[str, Note] = {}

    def find_by_title(self, title: str) -> Note | None:
        for note in self._notes.values():
            if note.title == title:
                return note
        return None

    def create(self, title: str) -> Note:
        now = utc_timestamp()
        note = Note(id=uuid.uuid4().hex, title=title, created_at=now, updated_at=now)
        self._notes[note.id] = note
        self._persist()
        return note

    def get(self, note_id: str) -> Note:
        try:
            return self._notes[note_id]
        except KeyError as exc:
            raise KeyError(note_id) from exc

    def update_content(self, note_id: str, content: str) -> Note:
        note = self.get(note_id)
        note.content = content
        note.updated_at = utc_timestamp()
        self._persist()
        return note

    def list_notes(self) -> List[Note]:
        """Return notes ordered by creation time."""
        return sorted(self._notes.values(), key=lambda note: (note.created_at, note.title))

    def _persist(self) -> None:
        """Hook for subclasses that write through to disk."""


class JsonNotesStore(InMemoryNotesStore):
    """Keeps every note in a single JSON file."""

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self._path = Path(path)
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise NoteStoreError(f"Unable to read notes file {self._path}: {exc}") from exc
        if not isinstance(raw, dict) or not isinstance(raw.get("notes"), list):
            raise NoteStoreError(f"Notes file {self._path} must contain a 'notes' list.")
        for entry in raw["notes"]:
            if not isinstance(entry, dict):
                raise NoteStoreError(f"Invalid note entry in {self._path}.")
            try:
                note = Note(
                    id=str(entry["id"]),
                    title=str(entry["title"]),
                    content=str(entry.get("content", "")),
                    created_at=str(entry.get("created_at", "")),
                    updated_at=str(entry.get("updated_at", "")),
                )
            except KeyError as exc:
                raise NoteStoreError(f"Note entry in {self._path} is missing {exc}.") from exc
            self._notes[note.id] = note

    def _persist(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"notes": [asdict(note) for note in self.list_notes()]}
        self._path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
