from __future__ import annotations

import sqlite3
import time
import uuid
from typing import Callable, List, Optional

from ..errors import NotFoundError, PersistenceError
from ..logs import LogContext
from ..models import Note
from ..repository import note_repo


class NoteService:
    """
    CRUD over the ``notes`` table.

    Owns the connection it is given: each call is one statement against it, with
    no caching and no multi-statement transactions. sqlite errors surface as
    PersistenceError; a missing id surfaces as NotFoundError.
    """

    def __init__(self, conn: sqlite3.Connection, clock: Callable[[], float] = time.time):
        self.conn = conn
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    def create_note(self, title: str, content: str | None = "") -> Note:
        with LogContext("CREATE_NOTE") as log:
            now = self._now()
            note = Note(
                id=str(uuid.uuid4()),
                title=title,
                content=content or "",
                created_at=now,
                updated_at=now,
            )
            log.set_entity("note", note.id)
            log.set_payload({"title_len": len(title), "content_len": len(note.content)})
            try:
                note_repo.insert(self.conn, note.id, note.title, note.content, note.created_at, note.updated_at)
            except sqlite3.Error as e:
                raise PersistenceError("create", e) from e
            return note

    def list_notes(self) -> List[Note]:
        """All notes, most recently modified first."""
        with LogContext("LIST_NOTES") as log:
            try:
                rows = note_repo.list_all(self.conn)
            except sqlite3.Error as e:
                raise PersistenceError("list", e) from e
            log.set_payload({"count": len(rows)})
            return [Note.from_row(r) for r in rows]

    def get_note(self, note_id: str) -> Note:
        with LogContext("GET_NOTE") as log:
            log.set_entity("note", note_id)
            return self._fetch("get", note_id)

    def update_note(self, note_id: str, title: str, content: str | None = "") -> Note:
        """Replace title and content, bump updated_at, and return the stored row."""
        with LogContext("UPDATE_NOTE") as log:
            log.set_entity("note", note_id)
            content = content or ""
            log.set_payload({"title_len": len(title), "content_len": len(content)})
            try:
                changed = note_repo.update(self.conn, note_id, title, content, self._now())
            except sqlite3.Error as e:
                raise PersistenceError("update", e, note_id) from e
            if changed == 0:
                raise NotFoundError("update", note_id)
            return self._fetch("update", note_id)

    def delete_note(self, note_id: str) -> None:
        with LogContext("DELETE_NOTE") as log:
            log.set_entity("note", note_id)
            try:
                changed = note_repo.delete(self.conn, note_id)
            except sqlite3.Error as e:
                raise PersistenceError("delete", e, note_id) from e
            if changed == 0:
                raise NotFoundError("delete", note_id)

    def save_note(self, note_id: Optional[str], title: str, content: str | None = "") -> Note:
        """
        Editor autosave: update ``note_id`` when given, otherwise create a new note.
        A blank title is refused before anything is written.
        """
        if not title or not title.strip():
            raise ValueError("note title is empty")
        if note_id:
            return self.update_note(note_id, title, content)
        return self.create_note(title, content)

    def _fetch(self, operation: str, note_id: str) -> Note:
        try:
            row = note_repo.get_one(self.conn, note_id)
        except sqlite3.Error as e:
            raise PersistenceError(operation, e, note_id) from e
        if row is None:
            raise NotFoundError(operation, note_id)
        return Note.from_row(row)
