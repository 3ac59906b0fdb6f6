"""Storage layer for notes."""

from datenotes.storage.json_store import JsonNoteStore
from datenotes.storage.memory_store import InMemoryNoteStore
from datenotes.storage.note_store import CloneResult, NoteStore

__all__ = [
    "CloneResult",
    "NoteStore",
    "InMemoryNoteStore",
    "JsonNoteStore",
]
