"""Read calendar configuration from a calendar root note."""

from datenotes.constants import CALENDAR_TYPE_LABEL, START_OF_THE_WEEK_LABEL
from datenotes.exceptions import ConfigurationError
from datenotes.models.calendar_config import (
    CONTAINER_GRANULARITIES,
    DEFAULT_PATTERNS,
    CalendarConfig,
    CalendarType,
    StartOfWeek,
)
from datenotes.models.note import Note


def read_calendar_config(root_note: Note) -> CalendarConfig:
    """Build the calendar configuration from the root's owned attributes.

    Missing labels fall back to defaults (monthly calendar, weeks starting
    on monday, the default title patterns, no templates).

    Raises:
        ConfigurationError: If calendarType is invalid.
    """
    calendar_type = root_note.get_owned_label_value(CALENDAR_TYPE_LABEL) or "monthly"
    try:
        calendar_type = CalendarType(calendar_type)
    except ValueError:
        raise ConfigurationError(
            '#calendarType should be "monthly" or "weekly"'
        ) from None

    # Validated when a week number is needed, so a per-call override can
    # stand in for an invalid label
    start_of_the_week = (
        root_note.get_owned_label_value(START_OF_THE_WEEK_LABEL)
        or StartOfWeek.MONDAY.value
    )

    patterns = {}
    templates = {}
    for granularity in CONTAINER_GRANULARITIES:
        patterns[granularity] = (
            root_note.get_owned_label_value(granularity.pattern_label)
            or DEFAULT_PATTERNS[granularity]
        )
        template_id = root_note.get_owned_relation_value(granularity.template_relation)
        if template_id:
            templates[granularity] = template_id

    return CalendarConfig(
        calendar_type=calendar_type,
        start_of_the_week=start_of_the_week,
        patterns=patterns,
        templates=templates,
    )
