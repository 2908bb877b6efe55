from __future__ import annotations

from .app import NoteApp
from .db import initialize
from .errors import (
    DatabaseConnectionError,
    DirectoryError,
    NoteAppError,
    NotFoundError,
    PersistenceError,
    SchemaError,
)
from .models import Note
from .services.note_svc import NoteService

__all__ = [
    "NoteApp",
    "Note",
    "NoteService",
    "initialize",
    "NoteAppError",
    "DirectoryError",
    "DatabaseConnectionError",
    "SchemaError",
    "NotFoundError",
    "PersistenceError",
]
