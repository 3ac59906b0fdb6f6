"""Pydantic models for date notes."""

from datenotes.models.calendar_config import (
    CalendarConfig,
    CalendarType,
    Granularity,
    StartOfWeek,
    WeekNoteOptions,
)
from datenotes.models.note import Attribute, AttributeType, Note
from datenotes.models.session import SessionContext

__all__ = [
    "Attribute",
    "AttributeType",
    "Note",
    "CalendarConfig",
    "CalendarType",
    "Granularity",
    "StartOfWeek",
    "WeekNoteOptions",
    "SessionContext",
]
