"""Note store interface consumed by the date note resolvers."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass

from datenotes.models.note import Attribute, Note


@dataclass
class CloneResult:
    """Outcome of attaching a note to an additional parent."""

    success: bool
    message: str = ""


class NoteStore(ABC):
    """Hierarchical note store.

    Implementations provide note creation, attribute writes, label search
    and all-or-nothing transactions. Search returns the earliest created
    match; when concurrent callers created duplicates this is stable but
    arbitrary.
    """

    @abstractmethod
    def get_note(self, note_id: str) -> Note:
        """Get a note by id.

        Raises:
            NoteNotFoundError: If no note has this id.
        """

    @abstractmethod
    def create_note(
        self,
        parent_id: str,
        title: str,
        content: str = "",
        is_protected: bool = False,
        type: str = "text",
    ) -> Note:
        """Create a note as the last child of parent_id."""

    @abstractmethod
    def create_label(self, note_id: str, name: str, value: str = "") -> Attribute:
        """Attach a label to a note."""

    @abstractmethod
    def create_relation(self, note_id: str, name: str, target_id: str) -> Attribute:
        """Attach a relation pointing at target_id to a note."""

    @abstractmethod
    def find_first_note_with_label(
        self, name: str, value: str | None = None, ancestor_id: str | None = None
    ) -> Note | None:
        """Find the first note carrying a label.

        Args:
            name: Label name
            value: Exact label value; None matches any value
            ancestor_id: Restrict the search to this note and its descendants
        """

    @abstractmethod
    def get_parent_notes(self, note: Note) -> list[Note]:
        """Get all parents of a note."""

    @abstractmethod
    def get_child_notes(self, note: Note) -> list[Note]:
        """Get the children of a note in position order."""

    @abstractmethod
    def clone_to(self, note_id: str, parent_id: str) -> CloneResult:
        """Attach an existing note as an additional child of parent_id.

        Failure is reported through the result, not raised.
        """

    @abstractmethod
    def transactional(self) -> AbstractContextManager["NoteStore"]:
        """Context manager grouping writes into one atomic unit.

        Nested blocks join the outermost transaction. An exception rolls
        back every write made inside the failing block.
        """
