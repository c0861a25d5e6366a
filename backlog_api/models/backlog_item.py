"""
Backlog API - BacklogItem SQLAlchemy Model
==========================================

What:  ORM model for the `backlog_items` table.
Who:   BacklogItemRepository for CRUD; Alembic for schema management.

Table:
    id      UUID primary key, assigned by the repository on first insert
    title   TEXT NOT NULL
    type    TEXT NOT NULL  (e.g. "story")
    status  TEXT NOT NULL  (e.g. "unstarted", "started")

    No indexes beyond the primary key, no foreign keys.
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from backlog_api.database import Base


class BacklogItem(Base):
    """
    One row of the backlog.

    Lifecycle:
        1. Created by save() without an id: a fresh UUID is generated
        2. Overwritten by save() with an id: title/type/status replaced
        3. Removed permanently by delete_by_id()
    """

    __tablename__ = "backlog_items"

    # Generic Uuid maps to native UUID on PostgreSQL and CHAR(32) on SQLite.
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    type: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<BacklogItem(id={self.id}, title='{self.title}', "
            f"type='{self.type}', status='{self.status}')>"
        )
