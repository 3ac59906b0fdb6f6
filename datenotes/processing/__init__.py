"""Date note resolution: calendar root, patterns and container hierarchy."""

from datenotes.processing.config_resolver import read_calendar_config
from datenotes.processing.hierarchy import HierarchyResolver
from datenotes.processing.patterns import expand_title
from datenotes.processing.root_resolver import get_root_calendar_note
from datenotes.processing.week_notes import WeekNoteResolver, week_label

__all__ = [
    "HierarchyResolver",
    "WeekNoteResolver",
    "expand_title",
    "get_root_calendar_note",
    "read_calendar_config",
    "week_label",
]
