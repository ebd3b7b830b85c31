"""Category ORM — owner-scoped grouping for tasks and notes.

Invariants:
    - name is unique per owner (user_id, name)
    - Deletion is blocked upstream while tasks or notes still reference it

Design Decisions:
    - user_id is an opaque owner reference: identity lives in the auth layer, not here
    - No cascade to tasks/notes: the CRUD layer refuses to delete non-empty categories
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from taskboard.db.base import Base


class Category(Base):
    """Category aggregate — scope for note ordering and task filters."""
    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_categories_user_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="category",
    )
    notes: Mapped[list["Note"]] = relationship(
        "Note", back_populates="category",
    )
