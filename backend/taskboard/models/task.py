"""Task ORM — a to-do item, optionally recurring.

Invariants:
    - Always belongs to a Category (category_id FK) and an owner (user_id)
    - recurrence is one of Recurrence values or NULL; anything else is read as NULL
    - A recurring task carries a due date (enforced on create/update)
    - due is stored in UTC

Design Decisions:
    - recurrence as a plain String column, not a DB enum: adding a rule needs no migration
    - user_id denormalized from the category: ownership checks are a single-row predicate
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from taskboard.db.base import Base


class Task(Base):
    """Task entity."""
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("categories.id"), nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    due: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    recurrence: Mapped[str | None] = mapped_column(
        String(20), nullable=True,
    )
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    category: Mapped["Category"] = relationship(
        "Category", back_populates="tasks",
    )
