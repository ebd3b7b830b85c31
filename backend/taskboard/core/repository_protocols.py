"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Handlers hold their store through these Protocols; the SQL stores are the
      default implementation, any object with the same methods can stand in
    - Stores never commit: the caller's unit of work owns the transaction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - for_update flag on reads: shell maps it to SELECT ... FOR UPDATE so read-then-write
      sequences hold a row lock for the rest of the transaction
    - Range update by predicate (shift_positions) instead of per-row writes: one
      statement per move regardless of how many notes sit between the two slots
"""

from datetime import datetime
from typing import Protocol

from taskboard.core.domain_types import CategoryId, NoteId, TaskId, UserId


class Clock(Protocol):
    """Supplies the current instant. Injected, never read ambiently."""
    def now(self) -> datetime: ...


class TaskLike(Protocol):
    """Structural contract for Task rows passed to the lifecycle planner."""
    id: TaskId
    status: bool
    due: datetime | None
    recurrence: str | None


class NoteLike(Protocol):
    """Structural contract for Note rows handled by the ordering service."""
    id: NoteId
    category_id: CategoryId
    position: int


class CategoryLike(Protocol):
    id: CategoryId


class TaskStore(Protocol):
    """Contract for task persistence, scoped by owner."""
    async def get_by_id(
        self, task_id: TaskId, owner_id: UserId, for_update: bool = False,
    ) -> TaskLike | None: ...
    async def update_by_id(
        self, task_id: TaskId, owner_id: UserId, **fields: object,
    ) -> int: ...
    async def add(self, task: TaskLike) -> TaskLike: ...
    async def get_category(
        self, category_id: CategoryId, owner_id: UserId,
    ) -> CategoryLike | None: ...


class NoteStore(Protocol):
    """Contract for note persistence within one category."""
    async def get_by_id(
        self, note_id: NoteId, for_update: bool = False,
    ) -> NoteLike | None: ...
    async def lock_category(self, category_id: CategoryId) -> int: ...
    async def shift_positions(
        self, category_id: CategoryId, low: int, high: int, delta: int,
        exclude: NoteId | None = None,
    ) -> int: ...
    async def set_position(self, note_id: NoteId, position: int) -> int: ...
    async def update_by_id(self, note_id: NoteId, **fields: object) -> int: ...
    async def next_position(self, category_id: CategoryId) -> int: ...
    async def add(self, note: NoteLike) -> NoteLike: ...
    async def delete_by_id(self, note_id: NoteId) -> int: ...
    async def list_by_category(
        self, category_id: CategoryId, search: str | None = None,
    ) -> list[NoteLike]: ...
    async def get_category(self, category_id: CategoryId) -> CategoryLike | None: ...
