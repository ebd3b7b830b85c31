"""Note ORM — a free-form note kept in a user-ordered list per category.

Invariants:
    - Always belongs to a Category (category_id FK)
    - Positions within one category are exactly {0..N-1} between transactions

Design Decisions:
    - No UNIQUE(category_id, position): a single range UPDATE passes through transient
      duplicates that non-deferred unique checks would reject mid-statement
    - Composite index serves both ordered listing and range shifts
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from taskboard.db.base import Base


class Note(Base):
    """Note entity — ordered by position within its category."""
    __tablename__ = "notes"
    __table_args__ = (
        Index("ix_notes_category_position", "category_id", "position"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("categories.id"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    category: Mapped["Category"] = relationship(
        "Category", back_populates="notes",
    )
