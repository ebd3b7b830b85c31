"""Note Handlers — drag reorder, append-on-create, edit, renumber-on-delete, listing.

Invariants:
    - Every writer keeps positions dense: {0..N-1} per category after each commit
    - Writers of one category run one at a time (category lock + FOR UPDATE on its rows)
    - reorder with from == to performs no reads and no writes
    - The moved note's stored position is re-read under the lock; a mismatch with the
      caller's positionMovedFrom is rejected (StalePositionError), never guessed around
    - Shift and final placement commit together or not at all

Design Decisions:
    - Category resolved from the note row, never from the caller (ADR: scope from record)
    - Short lookup transaction released before waiting on the lock: a session parked
      on the lock must not hold a read transaction another writer is waiting on
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import CategoryId, NoteId
from taskboard.core.errors import ErrorContext, ResourceNotFoundError, StalePositionError
from taskboard.core.note_ordering import (
    ShiftPlan, check_positions_in_range, plan_removal, plan_reorder,
)
from taskboard.core.repository_protocols import NoteLike, NoteStore
from taskboard.infrastructure.locks import KeyedLocks, category_locks
from taskboard.infrastructure.note_store import SqlNoteStore
from taskboard.models.note import Note
from taskboard.services.unit_of_work import unit_of_work

logger = logging.getLogger(__name__)


class NoteHandlers:
    """Ordered-note operations for one request."""

    def __init__(
        self, db: AsyncSession, locks: KeyedLocks = category_locks,
        store: NoteStore | None = None,
    ):
        self.db = db
        self.store: NoteStore = store or SqlNoteStore(db)
        self.locks = locks

    async def reorder(
        self, note_id: NoteId, position_from: int, position_to: int,
    ) -> ShiftPlan | None:
        """Move one note and shift the notes between its old and new slot."""
        plan = plan_reorder(position_from, position_to)
        if plan is None:
            return None

        category_id = await self._category_of(note_id)
        async with self.locks.hold(category_id):
            async with unit_of_work(
                self.db, "reorder notes", note_id=note_id, category_id=category_id,
            ):
                count = await self.store.lock_category(category_id)
                note = await self.store.get_by_id(note_id, for_update=True)
                if not note or note.category_id != category_id:
                    raise self._not_found(note_id)
                if note.position != position_from:
                    raise StalePositionError(
                        position_from, note.position,
                        ErrorContext(note_id=str(note_id), category_id=str(category_id)),
                    )
                check_positions_in_range(position_from, position_to, count)
                shifted = await self.store.shift_positions(
                    category_id, plan.low, plan.high, plan.delta, exclude=note_id,
                )
                await self.store.set_position(note_id, plan.target)

        logger.info(
            f"Note moved {position_from} -> {position_to}, {shifted} shifted",
            extra={"note_id": note_id, "category_id": category_id},
        )
        return plan

    async def create(
        self, category_id: CategoryId, name: str, content: str | None,
    ) -> NoteLike:
        """Append a note at the end of its category."""
        async with self.locks.hold(category_id):
            async with unit_of_work(
                self.db, "create note", category_id=category_id,
            ):
                if not await self.store.get_category(category_id):
                    raise ResourceNotFoundError("Category", str(category_id))
                await self.store.lock_category(category_id)
                position = await self.store.next_position(category_id)
                note = await self.store.add(Note(
                    category_id=category_id, name=name, content=content,
                    position=position,
                ))
        logger.info(
            f"Note created at position {position}",
            extra={"note_id": note.id, "category_id": category_id},
        )
        return note

    async def update(
        self, note_id: NoteId, name: str, content: str | None,
    ) -> NoteLike:
        """Edit title and body. Position is untouched, so no category lock."""
        async with unit_of_work(self.db, "update note", note_id=note_id):
            if not await self.store.get_by_id(note_id, for_update=True):
                raise self._not_found(note_id)
            await self.store.update_by_id(note_id, name=name, content=content)
            note = await self.store.get_by_id(note_id)
        logger.info("Note updated", extra={"note_id": note_id})
        return note

    async def delete(self, note_id: NoteId) -> None:
        """Delete a note and close the gap it leaves."""
        category_id = await self._category_of(note_id)
        async with self.locks.hold(category_id):
            async with unit_of_work(
                self.db, "delete note", note_id=note_id, category_id=category_id,
            ):
                count = await self.store.lock_category(category_id)
                note = await self.store.get_by_id(note_id, for_update=True)
                if not note or note.category_id != category_id:
                    raise self._not_found(note_id)
                position = note.position
                await self.store.delete_by_id(note_id)
                plan = plan_removal(position, count)
                if plan:
                    await self.store.shift_positions(
                        category_id, plan.low, plan.high, plan.delta,
                    )
        logger.info(
            f"Note deleted from position {position}",
            extra={"note_id": note_id, "category_id": category_id},
        )

    async def list_notes(
        self, category_id: CategoryId, search: str | None = None,
    ) -> list[NoteLike]:
        if not await self.store.get_category(category_id):
            raise ResourceNotFoundError("Category", str(category_id))
        return await self.store.list_by_category(category_id, search)

    async def _category_of(self, note_id: NoteId) -> CategoryId:
        async with unit_of_work(self.db, "look up note", note_id=note_id):
            note = await self.store.get_by_id(note_id)
            if not note:
                raise self._not_found(note_id)
            category_id = note.category_id
        return category_id

    @staticmethod
    def _not_found(note_id: NoteId) -> ResourceNotFoundError:
        return ResourceNotFoundError(
            "Note", str(note_id), ErrorContext(note_id=str(note_id)),
        )
