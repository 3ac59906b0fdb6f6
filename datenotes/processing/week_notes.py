"""Week container notes.

Weeks do not nest cleanly inside years: the last days of December may
belong to week 1 of the next year and the first days of January to the
final week of the previous one. The week label is keyed to the year owning
the week, while the note is placed under the year container of the date
it was requested for. When the same week is later requested from a date
in the other year, the existing note is cloned under that year as well.
"""

import logging
from datetime import date
from typing import TYPE_CHECKING

from datenotes.constants import WEEK_LABEL, YEAR_LABEL
from datenotes.date_utils import (
    get_start_of_the_week,
    get_week,
    get_week_year,
    parse_date,
    parse_start_of_the_week,
)
from datenotes.exceptions import CloneFailureError, StructuralIntegrityError
from datenotes.models.calendar_config import (
    CalendarConfig,
    Granularity,
    StartOfWeek,
    WeekNoteOptions,
)
from datenotes.models.note import Note
from datenotes.processing.config_resolver import read_calendar_config
from datenotes.processing.hierarchy import create_container, resolve_parent
from datenotes.processing.patterns import expand_title

if TYPE_CHECKING:
    from datenotes.service import DateNoteService

logger = logging.getLogger(__name__)


def week_label(day: date, start_of_the_week: StartOfWeek) -> str:
    """Canonical weekNote value, e.g. 2025WW1."""
    week_number = get_week(day, start_of_the_week)
    if week_number != 0:
        year = get_week_year(day, start_of_the_week)
        return f"{year:04d}WW{week_number}"

    # Week 0 is the tail of the previous year's final week
    last_day_of_year = date(day.year - 1, 12, 31)
    last_week_number = get_week(last_day_of_year, start_of_the_week)
    return f"{day.year - 1:04d}WW{last_week_number}"


class WeekNoteResolver:
    """Find-or-create logic for week container notes."""

    def __init__(self, service: "DateNoteService"):
        self.service = service

    def get_week_note(
        self, date_str: str, options: WeekNoteOptions | None, root_note: Note
    ) -> Note:
        store = self.service.store
        config = read_calendar_config(root_note)
        start_of_the_week = parse_start_of_the_week(
            (options.start_of_the_week if options else None)
            or config.start_of_the_week
        )

        day = parse_date(date_str)
        label = week_label(day, start_of_the_week)

        week_note = store.find_first_note_with_label(
            WEEK_LABEL, label, ancestor_id=root_note.note_id
        )
        if week_note is not None:
            return self._ensure_year_parent(week_note, date_str, root_note, config)

        if config.parent_of(Granularity.WEEK) is None:
            week_start = get_start_of_the_week(day, start_of_the_week).isoformat()
            logger.debug(
                f"No week level in a {config.calendar_type.value} calendar, "
                f"using day note for {week_start}"
            )
            return self.service.get_day_note(week_start, root_note)

        title = expand_title(
            config.pattern_for(Granularity.WEEK), date_str, config, start_of_the_week
        )
        parent_note = resolve_parent(
            self.service, Granularity.WEEK, date_str, root_note, config
        )
        return create_container(
            self.service, parent_note, title, Granularity.WEEK, label, config
        )

    def _ensure_year_parent(
        self, week_note: Note, date_str: str, root_note: Note, config: CalendarConfig
    ) -> Note:
        """Clone week_note under the date's year container if it is not there yet."""
        store = self.service.store
        parent_notes = store.get_parent_notes(week_note)
        if not parent_notes:
            raise StructuralIntegrityError(
                f"Week note '{week_note.note_id}' has no parent notes"
            )

        year_str = date_str[:4]
        for parent_note in parent_notes:
            if parent_note.get_owned_label_value(YEAR_LABEL) == year_str:
                return week_note

        logger.warning(
            f"Week note {week_note.note_id} is not under year {year_str}, cloning it"
        )
        parent_note = resolve_parent(
            self.service, Granularity.WEEK, date_str, root_note, config
        )
        if parent_note is None:
            raise StructuralIntegrityError(
                f'Can\'t find weekly parent note of date "{date_str}"'
            )

        with store.transactional():
            result = store.clone_to(week_note.note_id, parent_note.note_id)
            if not result.success:
                raise CloneFailureError(result.message)

        return week_note
