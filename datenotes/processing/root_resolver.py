"""Locate or create the calendar root note."""

import logging

from datenotes.constants import (
    CALENDAR_ROOT_LABEL,
    CALENDAR_ROOT_TITLE,
    ROOT_NOTE_ID,
    SORTED_LABEL,
    WORKSPACE_CALENDAR_ROOT_LABEL,
)
from datenotes.models.note import Note
from datenotes.models.session import SessionContext
from datenotes.storage.note_store import NoteStore

logger = logging.getLogger(__name__)


def get_root_calendar_note(store: NoteStore, session: SessionContext) -> Note:
    """Find the calendar root, creating it under the store root if missing.

    Inside an active workspace a #workspaceCalendarRoot within that
    workspace takes precedence over the global #calendarRoot.
    """
    root_note = None

    if session.is_workspace_active:
        root_note = store.find_first_note_with_label(
            WORKSPACE_CALENDAR_ROOT_LABEL, ancestor_id=session.workspace_note_id
        )

    if root_note is None:
        root_note = store.find_first_note_with_label(CALENDAR_ROOT_LABEL)

    if root_note is None:
        with store.transactional():
            root_note = store.create_note(ROOT_NOTE_ID, CALENDAR_ROOT_TITLE)
            store.create_label(root_note.note_id, CALENDAR_ROOT_LABEL)
            store.create_label(root_note.note_id, SORTED_LABEL)
        logger.info(f"Created calendar root note {root_note.note_id}")

    return root_note
