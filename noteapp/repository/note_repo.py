from __future__ import annotations

from sqlite3 import Connection, Row
from typing import List, Optional

# Layout is shared with databases written by earlier releases; do not change columns.
NOTES_DDL = """
CREATE TABLE IF NOT EXISTS notes (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    content TEXT,
    created_at INTEGER DEFAULT (strftime('%s', 'now')),
    updated_at INTEGER DEFAULT (strftime('%s', 'now'))
)
"""

_COLUMNS = (
    "id, title, COALESCE(content, '') AS content, "
    "COALESCE(created_at, 0) AS created_at, COALESCE(updated_at, 0) AS updated_at"
)


def ensure_schema(conn: Connection):
    conn.execute(NOTES_DDL)


def insert(conn: Connection, note_id: str, title: str, content: str, created_at: int, updated_at: int):
    conn.execute(
        "INSERT INTO notes(id, title, content, created_at, updated_at) VALUES(?, ?, ?, ?, ?)",
        (note_id, title, content, created_at, updated_at),
    )


def list_all(conn: Connection) -> List[Row]:
    # rowid breaks ties between notes touched within the same second
    sql = f"SELECT {_COLUMNS} FROM notes ORDER BY updated_at DESC, rowid DESC"
    return conn.execute(sql).fetchall()


def get_one(conn: Connection, note_id: str) -> Optional[Row]:
    return conn.execute(f"SELECT {_COLUMNS} FROM notes WHERE id=?", (note_id,)).fetchone()


def update(conn: Connection, note_id: str, title: str, content: str, updated_at: int) -> int:
    """Returns the number of rows changed (0 or 1). updated_at never moves backwards."""
    cur = conn.execute(
        "UPDATE notes SET title=?, content=?, updated_at=MAX(COALESCE(updated_at, 0), ?) WHERE id=?",
        (title, content, updated_at, note_id),
    )
    return cur.rowcount


def delete(conn: Connection, note_id: str) -> int:
    cur = conn.execute("DELETE FROM notes WHERE id=?", (note_id,))
    return cur.rowcount


def count_all(conn: Connection) -> int:
    return conn.execute("SELECT COUNT(1) AS cnt FROM notes").fetchone()["cnt"]
