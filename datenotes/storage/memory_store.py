"""In-memory note store."""

import logging
import uuid
from collections import deque
from contextlib import contextmanager
from typing import Callable, Iterator

from datenotes.constants import ROOT_NOTE_ID
from datenotes.exceptions import NoteNotFoundError
from datenotes.models.note import Attribute, AttributeType, Note
from datenotes.storage.note_store import CloneResult, NoteStore

logger = logging.getLogger(__name__)


class InMemoryNoteStore(NoteStore):
    """Note store kept entirely in memory.

    Writes inside a transaction are journaled as undo steps, so a rollback
    restores the previous state without replacing surviving note objects.
    """

    def __init__(self, notes: list[Note] | None = None):
        self._notes: dict[str, Note] = {}
        self._undo: list[Callable[[], None]] = []
        self._depth = 0

        for note in notes or []:
            self._notes[note.note_id] = note

        if ROOT_NOTE_ID not in self._notes:
            self._notes[ROOT_NOTE_ID] = Note(note_id=ROOT_NOTE_ID, title="root")

    def __len__(self) -> int:
        return len(self._notes)

    def notes(self) -> list[Note]:
        """All notes in creation order."""
        return list(self._notes.values())

    def get_note(self, note_id: str) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NoteNotFoundError(f"Note '{note_id}' not found")
        return note

    def create_note(
        self,
        parent_id: str,
        title: str,
        content: str = "",
        is_protected: bool = False,
        type: str = "text",
    ) -> Note:
        parent = self.get_note(parent_id)
        note = Note(
            note_id=self._new_id(),
            title=title,
            content=content,
            type=type,
            is_protected=is_protected,
            parent_ids=[parent_id],
        )
        self._notes[note.note_id] = note
        parent.child_ids.append(note.note_id)

        def undo() -> None:
            parent.child_ids.remove(note.note_id)
            del self._notes[note.note_id]

        self._record(undo)
        logger.debug(f"Created note {note.note_id} '{title}' under {parent_id}")
        return note

    def create_label(self, note_id: str, name: str, value: str = "") -> Attribute:
        return self._add_attribute(note_id, AttributeType.LABEL, name, value)

    def create_relation(self, note_id: str, name: str, target_id: str) -> Attribute:
        return self._add_attribute(note_id, AttributeType.RELATION, name, target_id)

    def find_first_note_with_label(
        self, name: str, value: str | None = None, ancestor_id: str | None = None
    ) -> Note | None:
        for note in self._notes.values():
            if not note.has_label(name, value):
                continue
            if ancestor_id is not None and not self._is_within(note, ancestor_id):
                continue
            return note
        return None

    def get_parent_notes(self, note: Note) -> list[Note]:
        return [self.get_note(parent_id) for parent_id in note.parent_ids]

    def get_child_notes(self, note: Note) -> list[Note]:
        return [self.get_note(child_id) for child_id in note.child_ids]

    def clone_to(self, note_id: str, parent_id: str) -> CloneResult:
        note = self._notes.get(note_id)
        parent = self._notes.get(parent_id)
        if note is None:
            return CloneResult(False, f"Note '{note_id}' not found")
        if parent is None:
            return CloneResult(False, f"Parent note '{parent_id}' not found")
        if parent_id in note.parent_ids:
            return CloneResult(
                False, f"Note '{note_id}' is already a child of '{parent_id}'"
            )
        if self._is_within(parent, note_id):
            return CloneResult(
                False, f"Cloning note '{note_id}' into '{parent_id}' would create a cycle"
            )

        note.parent_ids.append(parent_id)
        parent.child_ids.append(note_id)

        def undo() -> None:
            note.parent_ids.remove(parent_id)
            parent.child_ids.remove(note_id)

        self._record(undo)
        logger.debug(f"Cloned note {note_id} into {parent_id}")
        return CloneResult(True)

    @contextmanager
    def transactional(self) -> Iterator["InMemoryNoteStore"]:
        mark = len(self._undo)
        self._depth += 1
        try:
            yield self
        except Exception:
            self._rollback(mark)
            raise
        finally:
            self._depth -= 1

        if self._depth == 0:
            self._undo.clear()
            self._commit()

    def _commit(self) -> None:
        """Hook run after the outermost transaction (or a bare write) succeeds."""

    def _rollback(self, mark: int) -> None:
        logger.debug(f"Rolling back {len(self._undo) - mark} write(s)")
        while len(self._undo) > mark:
            self._undo.pop()()

    def _record(self, undo: Callable[[], None]) -> None:
        if self._depth:
            self._undo.append(undo)
        else:
            self._commit()

    def _add_attribute(
        self, note_id: str, type: AttributeType, name: str, value: str
    ) -> Attribute:
        note = self.get_note(note_id)
        attribute = Attribute(
            type=type, name=name, value=value, position=(len(note.attributes) + 1) * 10
        )
        note.attributes.append(attribute)

        def undo() -> None:
            note.attributes.remove(attribute)

        self._record(undo)
        return attribute

    def _is_within(self, note: Note, ancestor_id: str) -> bool:
        """True if note is ancestor_id itself or one of its descendants."""
        queue = deque([note.note_id])
        seen = set()
        while queue:
            current_id = queue.popleft()
            if current_id == ancestor_id:
                return True
            if current_id in seen:
                continue
            seen.add(current_id)
            current = self._notes.get(current_id)
            if current is not None:
                queue.extend(current.parent_ids)
        return False

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex[:12]
