from __future__ import annotations

# noteapp/db.py
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .datadir import DataDirResolver, resolver_for_platform
from .errors import DatabaseConnectionError, DirectoryError, SchemaError
from .repository import note_repo

logger = logging.getLogger(__name__)

DB_FILENAME = "notes.db"


def open_conn(path: str | Path) -> sqlite3.Connection:
    """
    Open a SQLite connection: Row row factory, autocommit, usable from any thread.
    """
    conn = sqlite3.connect(
        str(path),
        check_same_thread=False,
        isolation_level=None,
    )
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_conn(path: str | Path) -> Iterator[sqlite3.Connection]:
    conn = open_conn(path)
    try:
        yield conn
    finally:
        conn.close()


def resolve_data_dir(
    app_name: str,
    data_dir: str | Path | None = None,
    resolver: Optional[DataDirResolver] = None,
) -> Path:
    if data_dir:
        return Path(data_dir).expanduser()
    resolver = resolver or resolver_for_platform()
    return resolver.resolve(app_name)


def initialize(
    app_name: str,
    *,
    data_dir: str | Path | None = None,
    resolver: Optional[DataDirResolver] = None,
) -> sqlite3.Connection:
    """
    Bring storage up: data dir -> notes.db -> notes table.

    Every failure is fatal and raised as a StartupError subclass; nothing is retried.
    The caller owns the returned connection and must close it.
    """
    directory = resolve_data_dir(app_name, data_dir, resolver)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(f"failed to create data directory {directory}: {e}") from e

    db_path = directory / DB_FILENAME
    logger.info("Opening database at: %s", db_path)
    try:
        conn = open_conn(db_path)
    except sqlite3.Error as e:
        raise DatabaseConnectionError(f"failed to open database {db_path}: {e}") from e

    try:
        note_repo.ensure_schema(conn)
    except sqlite3.Error as e:
        conn.close()
        raise SchemaError(f"failed to create notes table: {e}") from e
    logger.info("Notes table ensured.")
    return conn
