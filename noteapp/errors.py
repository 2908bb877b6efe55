from __future__ import annotations

# noteapp/errors.py


class NoteAppError(Exception):
    """Base class for every error raised by noteapp."""


class StartupError(NoteAppError):
    """Raised while bringing storage up. Fatal: the host should not continue."""


class DirectoryError(StartupError):
    pass


class DatabaseConnectionError(StartupError):
    pass


class SchemaError(StartupError):
    pass


class OperationError(NoteAppError):
    """Raised by a note operation. Carries enough context for a user-facing message."""

    def __init__(self, message: str, operation: str, note_id: str | None = None):
        super().__init__(message)
        self.operation = operation
        self.note_id = note_id


class NotFoundError(OperationError):
    def __init__(self, operation: str, note_id: str):
        super().__init__(f"note with ID {note_id} not found", operation, note_id)


class PersistenceError(OperationError):
    def __init__(self, operation: str, cause: Exception, note_id: str | None = None):
        target = f"note {note_id}" if note_id else "note"
        if operation == "list":
            target = "notes"
        super().__init__(f"failed to {operation} {target}: {cause}", operation, note_id)
        self.cause = cause
