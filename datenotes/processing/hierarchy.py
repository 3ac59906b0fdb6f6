"""Find-or-create resolution of year, month and day container notes."""

import logging
from typing import TYPE_CHECKING

from datenotes.constants import SORTED_LABEL, TEMPLATE_RELATION
from datenotes.models.calendar_config import (
    CANONICAL_LENGTHS,
    CalendarConfig,
    Granularity,
)
from datenotes.models.note import Note
from datenotes.processing.config_resolver import read_calendar_config
from datenotes.processing.patterns import expand_title

if TYPE_CHECKING:
    from datenotes.service import DateNoteService

logger = logging.getLogger(__name__)

# Levels that have children in some hierarchy shape
PARENT_RESOLVERS = {
    Granularity.YEAR: lambda service, date_str, root: service.get_year_note(
        date_str, root
    ),
    Granularity.MONTH: lambda service, date_str, root: service.get_month_note(
        date_str, root
    ),
    Granularity.WEEK: lambda service, date_str, root: service.get_week_note(
        date_str, root=root
    ),
}


def resolve_parent(
    service: "DateNoteService",
    granularity: Granularity,
    date_str: str,
    root_note: Note,
    config: CalendarConfig,
) -> Note | None:
    """Resolve (creating if needed) the container a new note belongs under.

    Returns None when the granularity is not part of the calendar's
    hierarchy, e.g. a month in a weekly calendar.
    """
    parent = config.parent_of(granularity)
    if parent is None:
        return None
    if parent is Granularity.ROOT:
        return root_note
    return PARENT_RESOLVERS[parent](service, date_str, root_note)


def create_container(
    service: "DateNoteService",
    parent_note: Note,
    title: str,
    granularity: Granularity,
    label_value: str,
    config: CalendarConfig,
) -> Note:
    """Create a labelled container note under parent_note in one transaction."""
    store = service.store
    is_protected = (
        parent_note.is_protected and service.session.protected_content_available
    )

    with store.transactional():
        note = store.create_note(
            parent_note.note_id,
            title,
            content="",
            is_protected=is_protected,
            type="text",
        )
        store.create_label(note.note_id, granularity.label_name, label_value)
        store.create_label(note.note_id, SORTED_LABEL)

        template_id = config.template_for(granularity)
        if template_id:
            store.create_relation(note.note_id, TEMPLATE_RELATION, template_id)

    logger.info(
        f"Created {granularity.value} note '{title}' "
        f"(#{granularity.label_name}={label_value}) under {parent_note.note_id}"
    )
    return note


class HierarchyResolver:
    """Find-or-create logic for one container level (year, month or day)."""

    def __init__(self, granularity: Granularity, service: "DateNoteService"):
        if granularity not in CANONICAL_LENGTHS:
            raise ValueError(f"No canonical date form for {granularity.value} notes")
        self.granularity = granularity
        self.service = service

    def canonical_value(self, date_str: str) -> str:
        """Label value for the date: YYYY, YYYY-MM or YYYY-MM-DD."""
        return date_str[: CANONICAL_LENGTHS[self.granularity]]

    def fallback_date(self, date_str: str) -> str:
        """First day of the year/month containing the date."""
        if self.granularity is Granularity.YEAR:
            return f"{date_str[:4]}-01-01"
        if self.granularity is Granularity.MONTH:
            return f"{date_str[:7]}-01"
        return date_str

    def resolve_or_create(self, date_str: str, root_note: Note) -> Note:
        label = self.granularity.label_name
        value = self.canonical_value(date_str)
        store = self.service.store

        note = store.find_first_note_with_label(
            label, value, ancestor_id=root_note.note_id
        )
        if note is not None:
            return note

        config = read_calendar_config(root_note)

        if config.parent_of(self.granularity) is None:
            fallback = self.fallback_date(date_str)
            logger.debug(
                f"No {self.granularity.value} level in a {config.calendar_type.value} "
                f"calendar, using day note for {fallback}"
            )
            return self.service.get_day_note(fallback, root_note)

        title = expand_title(config.pattern_for(self.granularity), date_str, config)
        parent_note = resolve_parent(
            self.service, self.granularity, date_str, root_note, config
        )
        return create_container(
            self.service, parent_note, title, self.granularity, value, config
        )
