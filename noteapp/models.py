from __future__ import annotations

from sqlite3 import Row

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """A single note as stored in the ``notes`` table."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    content: str = ""
    created_at: int = Field(..., alias="createdAt", description="Unix seconds, set once")
    updated_at: int = Field(..., alias="updatedAt", description="Unix seconds, bumped on update")

    @classmethod
    def from_row(cls, row: Row) -> "Note":
        return cls(
            id=row["id"],
            title=row["title"],
            content=row["content"] or "",
            created_at=int(row["created_at"] or 0),
            updated_at=int(row["updated_at"] or 0),
        )

    def to_dict(self) -> dict:
        """JSON shape handed to hosts: ``id, title, content, createdAt, updatedAt``."""
        return self.model_dump(by_alias=True)
