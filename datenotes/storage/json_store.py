"""Note store persisted to a single JSON file."""

import logging
from pathlib import Path

from pydantic import BaseModel

from datenotes.models.note import Note
from datenotes.storage.memory_store import InMemoryNoteStore

logger = logging.getLogger(__name__)


class StoreSnapshot(BaseModel):
    """On-disk representation of a note store."""

    notes: list[Note]


class JsonNoteStore(InMemoryNoteStore):
    """In-memory store that writes itself to disk after every commit."""

    def __init__(self, path: Path):
        self.path = Path(path)
        notes = None
        if self.path.exists():
            snapshot = StoreSnapshot.model_validate_json(self.path.read_text())
            notes = snapshot.notes
            logger.debug(f"Loaded {len(notes)} notes from {self.path}")
        super().__init__(notes)

    def _commit(self) -> None:
        self.save()

    def save(self) -> None:
        """Write every note to the store file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        snapshot = StoreSnapshot(notes=self.notes())
        self.path.write_text(snapshot.model_dump_json(indent=2))
