import pytest

from datenotes import create_app
from datenotes.constants import CALENDAR_ROOT_LABEL, ROOT_NOTE_ID
from datenotes.service import DateNoteService
from datenotes.storage.memory_store import InMemoryNoteStore


@pytest.fixture
def store():
    """Empty in-memory note store."""
    return InMemoryNoteStore()


@pytest.fixture
def service(store):
    """Date note service with a fixed 'today'."""
    return DateNoteService(store, today=lambda: "2024-03-15")


@pytest.fixture
def make_calendar_root(store):
    """Factory creating a #calendarRoot note with extra labels/relations."""

    def _make(relations=None, **labels):
        with store.transactional():
            root = store.create_note(ROOT_NOTE_ID, "Calendar")
            store.create_label(root.note_id, CALENDAR_ROOT_LABEL)
            for name, value in labels.items():
                store.create_label(root.note_id, name, value)
            for name, target_id in (relations or {}).items():
                store.create_relation(root.note_id, name, target_id)
        return root

    return _make


@pytest.fixture
def app(service):
    """Create and configure a Flask app for testing."""
    app = create_app(service)
    return app
