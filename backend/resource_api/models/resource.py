"""Resource ORM — persisted row for the single Resource entity.

Invariants:
    - id is INTEGER PRIMARY KEY AUTOINCREMENT: ids are never reused after delete
    - tags stored as a JSON array text column, decoded to list[str] on read
    - created_at / updated_at are fixed-width ISO-8601 strings (core/timestamps.py)

Design Decisions:
    - Timestamps as strings, not DateTime: string order is the sort order and
      the API returns them verbatim
    - Defaults set by the repository, server defaults mirror them for raw inserts
"""

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.db.base import Base


class Resource(Base):
    """Resource row."""
    __tablename__ = "resources"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default="",
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft", server_default="draft",
    )
    tags: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list, server_default="[]",
    )
    created_at: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    updated_at: Mapped[str] = mapped_column(String(32), nullable=False)
