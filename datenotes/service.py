"""Date note service: public entry points for calendar container notes."""

import logging
from typing import Callable

from datenotes.date_utils import canonicalize_date, local_now_date
from datenotes.models.calendar_config import (
    CalendarConfig,
    Granularity,
    WeekNoteOptions,
)
from datenotes.models.note import Note
from datenotes.models.session import SessionContext
from datenotes.processing.config_resolver import read_calendar_config
from datenotes.processing.hierarchy import HierarchyResolver
from datenotes.processing.root_resolver import get_root_calendar_note
from datenotes.processing.week_notes import WeekNoteResolver
from datenotes.storage.note_store import NoteStore

logger = logging.getLogger(__name__)


class DateNoteService:
    """Resolve calendar container notes for dates, creating them on demand.

    Every operation takes a canonical YYYY-MM-DD date string and an optional
    calendar root; without a root the calendar root note is looked up (and
    created if the store has none).

    Usage:
        service = DateNoteService(InMemoryNoteStore())
        day_note = service.get_day_note("2024-03-15")
    """

    def __init__(
        self,
        store: NoteStore,
        session: SessionContext | None = None,
        today: Callable[[], str] | None = None,
    ):
        """
        Initialize service.

        Args:
            store: Note store the containers live in
            session: Caller session state (protected content, workspace)
            today: Returns today's date string; defaults to the local date
        """
        self.store = store
        self.session = session or SessionContext()
        self._today = today or local_now_date

        self._resolvers = {
            granularity: HierarchyResolver(granularity, self)
            for granularity in (Granularity.YEAR, Granularity.MONTH, Granularity.DAY)
        }
        self._week_resolver = WeekNoteResolver(self)

    def get_root_calendar_note(self) -> Note:
        return get_root_calendar_note(self.store, self.session)

    def get_calendar_config(self, root: Note | None = None) -> CalendarConfig:
        """Effective configuration of a calendar root."""
        return read_calendar_config(root or self.get_root_calendar_note())

    def get_year_note(self, date_str: str, root: Note | None = None) -> Note:
        return self._resolve(Granularity.YEAR, date_str, root)

    def get_month_note(self, date_str: str, root: Note | None = None) -> Note:
        """Month container for the date.

        Weekly calendars have no month level; the day note of the first of
        the month is returned instead.
        """
        return self._resolve(Granularity.MONTH, date_str, root)

    def get_week_note(
        self,
        date_str: str,
        options: WeekNoteOptions | None = None,
        root: Note | None = None,
    ) -> Note:
        """Week container for the date.

        Monthly calendars have no week level; the day note of the first day
        of the week is returned instead.
        """
        date_str = canonicalize_date(date_str)
        root = root or self.get_root_calendar_note()
        logger.debug(f"Resolving week note for {date_str} under {root.note_id}")
        return self._week_resolver.get_week_note(date_str, options, root)

    def get_day_note(self, date_str: str, root: Note | None = None) -> Note:
        return self._resolve(Granularity.DAY, date_str, root)

    def get_today_note(self, root: Note | None = None) -> Note:
        return self.get_day_note(self._today(), root)

    def _resolve(self, granularity: Granularity, date_str: str, root: Note | None) -> Note:
        date_str = canonicalize_date(date_str)
        root = root or self.get_root_calendar_note()
        logger.debug(
            f"Resolving {granularity.value} note for {date_str} under {root.note_id}"
        )
        return self._resolvers[granularity].resolve_or_create(date_str, root)
