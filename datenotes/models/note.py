"""Note and attribute models with Pydantic v2 validation."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from datenotes.constants import ROOT_NOTE_ID


class AttributeType(str, Enum):
    """Attribute type enumeration."""

    LABEL = "label"
    RELATION = "relation"


class Attribute(BaseModel):
    """Label or relation owned by a note.

    Relations carry the target note id as their value.
    """

    type: AttributeType
    name: str
    value: str = ""
    position: int = 0


class Note(BaseModel):
    """A note in the hierarchical store.

    A note may be placed under several parents (clones), so the store is a
    directed acyclic graph rather than a strict tree.
    """

    note_id: str
    title: str
    content: str = ""
    type: str = "text"
    is_protected: bool = False
    parent_ids: list[str] = Field(default_factory=list)
    child_ids: list[str] = Field(default_factory=list)
    attributes: list[Attribute] = Field(default_factory=list)
    created: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        return self.note_id == ROOT_NOTE_ID

    def get_owned_attribute(self, type: AttributeType, name: str) -> Attribute | None:
        """Get the first owned attribute of the given type and name."""
        for attribute in self.attributes:
            if attribute.type == type and attribute.name == name:
                return attribute
        return None

    def get_owned_label_value(self, name: str) -> str | None:
        """Get the value of an owned label, or None if the label is absent."""
        attribute = self.get_owned_attribute(AttributeType.LABEL, name)
        return attribute.value if attribute else None

    def get_owned_relation_value(self, name: str) -> str | None:
        """Get the target note id of an owned relation."""
        attribute = self.get_owned_attribute(AttributeType.RELATION, name)
        return attribute.value if attribute else None

    def has_label(self, name: str, value: str | None = None) -> bool:
        """Check for an owned label, optionally with an exact value."""
        for attribute in self.attributes:
            if attribute.type != AttributeType.LABEL or attribute.name != name:
                continue
            if value is None or attribute.value == value:
                return True
        return False
