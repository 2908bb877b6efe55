import sqlite3

import pytest

from noteapp.app import NoteApp
from noteapp.errors import DirectoryError, NotFoundError

from .conftest import FakeClock


def test_lifecycle_with_context_manager(data_dir):
    with NoteApp(data_dir=data_dir) as app:
        note = app.create_note("Groceries", "Milk, eggs")
        assert app.get_note(note.id) == note
        conn = app._conn

    assert app._conn is None
    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_operations_before_startup_fail():
    app = NoteApp(data_dir="unused")
    with pytest.raises(RuntimeError, match="startup"):
        app.get_notes()


def test_data_persists_across_restarts(data_dir):
    with NoteApp(data_dir=data_dir) as app:
        created = app.create_note("Persist", "me")

    with NoteApp(data_dir=data_dir) as app:
        assert app.get_notes() == [created]


def test_startup_twice_keeps_connection(data_dir):
    app = NoteApp(data_dir=data_dir)
    app.startup()
    first = app._conn
    app.startup()
    assert app._conn is first
    app.shutdown()
    app.shutdown()


def test_startup_errors_propagate(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")

    with pytest.raises(DirectoryError):
        NoteApp(data_dir=blocker / "NoteApp").startup()


def test_bound_operations_round_trip(data_dir):
    clock = FakeClock()
    with NoteApp(data_dir=data_dir, clock=clock) as app:
        a = app.create_note("a", "")
        clock.tick()
        b = app.save_note(None, "b", "")
        clock.tick()
        a2 = app.update_note(a.id, "a2", "changed")

        assert [n.id for n in app.get_notes()] == [a2.id, b.id]

        app.delete_note(b.id)
        with pytest.raises(NotFoundError):
            app.get_note(b.id)


def test_db_path_uses_resolved_dir(data_dir):
    assert NoteApp(data_dir=data_dir).db_path == data_dir / "notes.db"
