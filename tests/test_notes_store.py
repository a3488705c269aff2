import json
from pathlib import Path

import pytest

from termquest.data.errors import NoteStoreError
from termquest.data.notes_store import InMemoryNotesStore, JsonNotesStore


def test_in_memory_store_creates_and_finds_by_title() -> None:
    store = InMemoryNotesStore()

    note = store.create("linux-tips")

    assert store.find_by_title("linux-tips") is note
    assert store.find_by_title("missing") is None
    assert note.created_at == note.updated_at
    assert note.content == ""


def test_in_memory_store_update_changes_content() -> None:
    store = InMemoryNotesStore()
    note = store.create("todo")

    store.update_content(note.id, "learn grep\n")

    assert store.get(note.id).content == "learn grep\n"


def test_in_memory_store_get_unknown_id_raises_key_error() -> None:
    with pytest.raises(KeyError):
        InMemoryNotesStore().get("nope")


def test_json_store_persists_between_instances(tmp_path: Path) -> None:
    path = tmp_path / "notes" / "notes.json"
    store = JsonNotesStore(path)
    note = store.create("commands")
    store.update_content(note.id, "ls -la\n")

    reloaded = JsonNotesStore(path)
    found = reloaded.find_by_title("commands")

    assert found is not None
    assert found.id == note.id
    assert found.content == "ls -la\n"
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["notes"][0]["title"] == "commands"


def test_json_store_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(NoteStoreError):
        JsonNotesStore(path)


def test_json_store_rejects_wrong_shape(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    path.write_text(json.dumps({"notes": [{"title": "no id"}]}), encoding="utf-8")

    with pytest.raises(NoteStoreError):
        JsonNotesStore(path)
