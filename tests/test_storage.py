"""Tests for the in-memory and JSON note stores."""

import pytest

from datenotes.constants import ROOT_NOTE_ID
from datenotes.exceptions import NoteNotFoundError
from datenotes.service import DateNoteService
from datenotes.storage.json_store import JsonNoteStore
from datenotes.storage.memory_store import InMemoryNoteStore


def test_store_starts_with_root(store):
    root = store.get_note(ROOT_NOTE_ID)
    assert root.is_root
    assert len(store) == 1


def test_get_unknown_note(store):
    with pytest.raises(NoteNotFoundError):
        store.get_note("missing")


def test_create_note_links_parent(store):
    note = store.create_note(ROOT_NOTE_ID, "Child")
    assert note.parent_ids == [ROOT_NOTE_ID]
    assert store.get_note(ROOT_NOTE_ID).child_ids == [note.note_id]
    assert store.get_child_notes(store.get_note(ROOT_NOTE_ID)) == [note]


def test_labels_and_relations(store):
    note = store.create_note(ROOT_NOTE_ID, "Tagged")
    store.create_label(note.note_id, "yearNote", "2024")
    store.create_label(note.note_id, "sorted")
    store.create_relation(note.note_id, "template", "tpl")
    assert note.get_owned_label_value("yearNote") == "2024"
    assert note.get_owned_label_value("sorted") == ""
    assert note.get_owned_relation_value("template") == "tpl"
    assert note.get_owned_label_value("template") is None


def test_find_first_returns_earliest(store):
    first = store.create_note(ROOT_NOTE_ID, "First")
    second = store.create_note(ROOT_NOTE_ID, "Second")
    store.create_label(second.note_id, "dateNote", "2024-03-15")
    store.create_label(first.note_id, "dateNote", "2024-03-15")
    assert store.find_first_note_with_label("dateNote", "2024-03-15") is first


def test_find_first_value_and_presence(store):
    note = store.create_note(ROOT_NOTE_ID, "Year")
    store.create_label(note.note_id, "yearNote", "2024")
    assert store.find_first_note_with_label("yearNote") is note
    assert store.find_first_note_with_label("yearNote", "2024") is note
    assert store.find_first_note_with_label("yearNote", "2023") is None


def test_find_first_scoped_to_ancestor(store):
    calendar = store.create_note(ROOT_NOTE_ID, "Calendar")
    other = store.create_note(ROOT_NOTE_ID, "Other")
    outside = store.create_note(other.note_id, "Outside")
    store.create_label(outside.note_id, "yearNote", "2024")

    assert store.find_first_note_with_label("yearNote", "2024", calendar.note_id) is None

    inside = store.create_note(calendar.note_id, "Inside")
    store.create_label(inside.note_id, "yearNote", "2024")
    assert store.find_first_note_with_label("yearNote", "2024", calendar.note_id) is inside


def test_find_first_follows_clones(store):
    calendar = store.create_note(ROOT_NOTE_ID, "Calendar")
    other = store.create_note(ROOT_NOTE_ID, "Other")
    note = store.create_note(other.note_id, "Week")
    store.create_label(note.note_id, "weekNote", "2024WW11")
    assert store.clone_to(note.note_id, calendar.note_id).success
    assert store.find_first_note_with_label("weekNote", ancestor_id=calendar.note_id) is note


def test_clone_to(store):
    first = store.create_note(ROOT_NOTE_ID, "First")
    second = store.create_note(ROOT_NOTE_ID, "Second")
    child = store.create_note(first.note_id, "Child")

    result = store.clone_to(child.note_id, second.note_id)
    assert result.success
    assert child.parent_ids == [first.note_id, second.note_id]
    assert [p.title for p in store.get_parent_notes(child)] == ["First", "Second"]


def test_clone_to_reports_failures(store):
    parent = store.create_note(ROOT_NOTE_ID, "Parent")
    child = store.create_note(parent.note_id, "Child")

    duplicate = store.clone_to(child.note_id, parent.note_id)
    assert not duplicate.success
    assert "already" in duplicate.message

    cycle = store.clone_to(parent.note_id, child.note_id)
    assert not cycle.success
    assert "cycle" in cycle.message

    missing = store.clone_to("missing", parent.note_id)
    assert not missing.success


def test_transaction_rolls_back(store):
    with pytest.raises(RuntimeError):
        with store.transactional():
            note = store.create_note(ROOT_NOTE_ID, "Doomed")
            store.create_label(note.note_id, "dateNote", "2024-03-15")
            raise RuntimeError("boom")

    assert len(store) == 1
    assert store.get_note(ROOT_NOTE_ID).child_ids == []
    assert store.find_first_note_with_label("dateNote") is None


def test_nested_transaction_rolls_back_inner_only(store):
    with store.transactional():
        kept = store.create_note(ROOT_NOTE_ID, "Kept")
        with pytest.raises(RuntimeError):
            with store.transactional():
                store.create_note(ROOT_NOTE_ID, "Doomed")
                raise RuntimeError("boom")

    assert [n.title for n in store.get_child_notes(store.get_note(ROOT_NOTE_ID))] == [
        kept.title
    ]


def test_rollback_keeps_existing_labels(store):
    note = store.create_note(ROOT_NOTE_ID, "Existing")
    store.create_label(note.note_id, "yearNote", "2024")
    with pytest.raises(RuntimeError):
        with store.transactional():
            store.create_label(note.note_id, "sorted")
            raise RuntimeError("boom")
    assert note.has_label("yearNote", "2024")
    assert not note.has_label("sorted")


def test_json_store_persists(tmp_path):
    path = tmp_path / "data" / "notes.json"
    first = DateNoteService(JsonNoteStore(path))
    day = first.get_day_note("2024-03-15")
    assert path.exists()

    reloaded_store = JsonNoteStore(path)
    second = DateNoteService(reloaded_store)
    count = len(reloaded_store)
    again = second.get_day_note("2024-03-15")

    assert again.note_id == day.note_id
    assert again.title == "15 - Friday"
    assert len(reloaded_store) == count


def test_json_store_skips_rolled_back_writes(tmp_path):
    path = tmp_path / "notes.json"
    store = JsonNoteStore(path)
    with pytest.raises(RuntimeError):
        with store.transactional():
            store.create_note(ROOT_NOTE_ID, "Doomed")
            raise RuntimeError("boom")

    assert not path.exists()
    assert len(JsonNoteStore(path)) == 1


def test_in_memory_store_accepts_notes(store):
    note = store.create_note(ROOT_NOTE_ID, "Copied")
    copy = InMemoryNoteStore(store.notes())
    assert copy.get_note(note.note_id).title == "Copied"
