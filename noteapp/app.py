"""
Host-facing application object.

The UI/command layer calls ``startup()`` once, then the note operations, then
``shutdown()``. ``with NoteApp(...) as app:`` does the same and always releases
the connection.
"""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Callable, List, Optional

from .datadir import DataDirResolver
from .db import DB_FILENAME, initialize, resolve_data_dir
from .models import Note
from .services.note_svc import NoteService

logger = logging.getLogger(__name__)


class NoteApp:
    def __init__(
        self,
        app_name: str = "NoteApp",
        data_dir: str | Path | None = None,
        resolver: Optional[DataDirResolver] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.app_name = app_name
        self.data_dir = data_dir
        self.resolver = resolver
        self._clock = clock
        self._conn: Optional[sqlite3.Connection] = None
        self._notes: Optional[NoteService] = None

    @property
    def db_path(self) -> Path:
        return resolve_data_dir(self.app_name, self.data_dir, self.resolver) / DB_FILENAME

    @property
    def notes(self) -> NoteService:
        if self._notes is None:
            raise RuntimeError("NoteApp.startup() has not been called")
        return self._notes

    def startup(self) -> None:
        """Open storage. StartupError subclasses propagate; there is no degraded mode."""
        if self._conn is not None:
            return
        conn = initialize(self.app_name, data_dir=self.data_dir, resolver=self.resolver)
        self._conn = conn
        self._notes = NoteService(conn) if self._clock is None else NoteService(conn, clock=self._clock)

    def shutdown(self) -> None:
        if self._conn is not None:
            logger.info("Closing database connection.")
            self._conn.close()
        self._conn = None
        self._notes = None

    def __enter__(self) -> "NoteApp":
        self.startup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False

    # Operations bound to the host
    def create_note(self, title: str, content: str) -> Note:
        return self.notes.create_note(title, content)

    def get_notes(self) -> List[Note]:
        return self.notes.list_notes()

    def get_note(self, note_id: str) -> Note:
        return self.notes.get_note(note_id)

    def update_note(self, note_id: str, title: str, content: str) -> Note:
        return self.notes.update_note(note_id, title, content)

    def delete_note(self, note_id: str) -> None:
        self.notes.delete_note(note_id)

    def save_note(self, note_id: Optional[str], title: str, content: str) -> Note:
        return self.notes.save_note(note_id, title, content)
