"""Data access layer: puzzle resources and note storage."""

from .errors import DataError, NoteStoreError, ResourceLoadError
from .notes_store import InMemoryNotesStore, JsonNotesStore, NotesStore
from .resource_loader import PuzzleResourceLoader, load_read_puzzle

__all__ = [
    "DataError",
    "NoteStoreError",
    "ResourceLoadError",
    "InMemoryNotesStore",
    "JsonNotesStore",
    "NotesStore",
    "PuzzleResourceLoader",
    "load_read_puzzle",
]
