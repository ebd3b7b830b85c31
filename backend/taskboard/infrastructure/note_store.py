"""Note Store — SQLAlchemy implementation of the NoteStore protocol.

Invariants:
    - shift_positions is one UPDATE statement over a bounded position range
    - lock_category row-locks every note in the category (FOR UPDATE) so concurrent
      reorders of the same category serialize on Postgres
    - Never commits: the caller's unit of work owns the transaction boundary

Design Decisions:
    - synchronize_session=False on bulk updates: rows loaded earlier in the session are
      refreshed with populate_existing on the next read instead
"""

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import CategoryId, NoteId
from taskboard.models.category import Category
from taskboard.models.note import Note


class SqlNoteStore:
    """Note persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(
        self, note_id: NoteId, for_update: bool = False,
    ) -> Note | None:
        query = select(Note).where(Note.id == note_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def lock_category(self, category_id: CategoryId) -> int:
        """Row-lock the category's notes; returns how many there are."""
        result = await self.db.execute(
            select(Note.id)
            .where(Note.category_id == category_id)
            .with_for_update()
        )
        return len(result.all())

    async def shift_positions(
        self, category_id: CategoryId, low: int, high: int, delta: int,
        exclude: NoteId | None = None,
    ) -> int:
        query = (
            update(Note)
            .where(
                Note.category_id == category_id,
                Note.position >= low,
                Note.position <= high,
            )
            .values(position=Note.position + delta)
            .execution_options(synchronize_session=False)
        )
        if exclude is not None:
            query = query.where(Note.id != exclude)
        result = await self.db.execute(query)
        return result.rowcount

    async def set_position(self, note_id: NoteId, position: int) -> int:
        result = await self.db.execute(
            update(Note)
            .where(Note.id == note_id)
            .values(position=position)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def update_by_id(self, note_id: NoteId, **fields: object) -> int:
        result = await self.db.execute(
            update(Note)
            .where(Note.id == note_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def next_position(self, category_id: CategoryId) -> int:
        result = await self.db.execute(
            select(func.coalesce(func.max(Note.position), -1) + 1)
            .where(Note.category_id == category_id)
        )
        return result.scalar_one()

    async def add(self, note: Note) -> Note:
        self.db.add(note)
        await self.db.flush()
        return note

    async def delete_by_id(self, note_id: NoteId) -> int:
        result = await self.db.execute(
            delete(Note)
            .where(Note.id == note_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def list_by_category(
        self, category_id: CategoryId, search: str | None = None,
    ) -> list[Note]:
        query = select(Note).where(Note.category_id == category_id)
        if search:
            query = query.where(Note.name.contains(search, autoescape=True))
        result = await self.db.execute(
            query.order_by(Note.position.asc(), Note.name.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_category(self, category_id: CategoryId) -> Category | None:
        result = await self.db.execute(
            select(Category).where(Category.id == category_id),
        )
        return result.scalar_one_or_none()
