"""Task Handlers — status toggle, manual reschedule, create and update.

Invariants:
    - Each operation is one unit of work under the task's lock
    - Read-then-write sequences re-read the row with FOR UPDATE inside the transaction
    - Unknown and foreign tasks both raise ResourceNotFoundError
    - "now" comes from the injected clock, the timezone from the constructor

Design Decisions:
    - Pure planners (core/task_lifecycle) decide the change set; handlers only
      fetch, lock and persist (ADR: functional core, imperative shell)
    - Recurrence normalized on write: unrecognized values are stored as NULL
"""

import logging
from datetime import timezone, tzinfo

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import CategoryId, TaskId, UserId, normalize_recurrence
from taskboard.core.errors import ErrorContext, ResourceNotFoundError
from taskboard.core.recurrence import resolve_timezone
from taskboard.core.repository_protocols import Clock, TaskLike, TaskStore
from taskboard.core.task_lifecycle import (
    check_recurrence_has_due, plan_reschedule, plan_status_change,
)
from taskboard.infrastructure.locks import KeyedLocks, task_locks
from taskboard.infrastructure.task_store import SqlTaskStore
from taskboard.models.task import Task
from taskboard.schemas.task import TaskWrite
from taskboard.services.unit_of_work import unit_of_work

logger = logging.getLogger(__name__)


class TaskHandlers:
    """Task lifecycle operations for one request."""

    def __init__(
        self, db: AsyncSession, clock: Clock, workspace_tz: str | tzinfo | None,
        locks: KeyedLocks = task_locks, store: TaskStore | None = None,
    ):
        self.db = db
        self.store: TaskStore = store or SqlTaskStore(db)
        self.clock = clock
        self.workspace_tz = workspace_tz
        self.locks = locks

    async def update_status(
        self, user_id: UserId, task_id: TaskId, value: bool,
    ) -> dict:
        """Set status; completing a recurring task advances due and reopens it."""
        async with self.locks.hold(task_id):
            async with unit_of_work(
                self.db, "update task", task_id=task_id, user_id=user_id,
            ):
                task = await self._get_owned(task_id, user_id)
                changes = plan_status_change(
                    task, value, self.clock.now(), self.workspace_tz,
                )
                await self.store.update_by_id(task_id, user_id, **changes)
        logger.info(
            f"Task status set to {value}",
            extra={"task_id": task_id, "user_id": user_id},
        )
        return changes

    async def reschedule(self, user_id: UserId, task_id: TaskId) -> dict:
        """Push a recurring task to today or its next occurrence."""
        async with self.locks.hold(task_id):
            async with unit_of_work(
                self.db, "reschedule task", task_id=task_id, user_id=user_id,
            ):
                task = await self._get_owned(task_id, user_id)
                changes = plan_reschedule(task, self.clock.now(), self.workspace_tz)
                await self.store.update_by_id(task_id, user_id, **changes)
        logger.info(
            f"Task rescheduled to {changes['due'].isoformat()}",
            extra={"task_id": task_id, "user_id": user_id},
        )
        return changes

    async def create(
        self, user_id: UserId, category_id: CategoryId, data: TaskWrite,
    ) -> TaskLike:
        check_recurrence_has_due(data.recurrence, data.due)
        async with unit_of_work(
            self.db, "create task", category_id=category_id, user_id=user_id,
        ):
            category = await self.store.get_category(category_id, user_id)
            if not category:
                raise ResourceNotFoundError("Category", str(category_id))
            task = await self.store.add(Task(
                user_id=user_id, category_id=category.id,
                **self._columns(data),
            ))
        return task

    async def update(
        self, user_id: UserId, task_id: TaskId, data: TaskWrite,
    ) -> TaskLike:
        check_recurrence_has_due(data.recurrence, data.due)
        async with self.locks.hold(task_id):
            async with unit_of_work(
                self.db, "update task", task_id=task_id, user_id=user_id,
            ):
                await self._get_owned(task_id, user_id)
                await self.store.update_by_id(
                    task_id, user_id, **self._columns(data),
                )
                task = await self.store.get_by_id(task_id, user_id)
        return task

    async def _get_owned(self, task_id: TaskId, user_id: UserId) -> TaskLike:
        task = await self.store.get_by_id(task_id, user_id, for_update=True)
        if not task:
            raise ResourceNotFoundError(
                "Task", str(task_id), ErrorContext(task_id=str(task_id)),
            )
        return task

    def _columns(self, data: TaskWrite) -> dict:
        recurrence = normalize_recurrence(data.recurrence)
        due = data.due
        if due is not None and due.tzinfo is None:
            # Form input without an offset is wall time in the workspace zone.
            due = due.replace(tzinfo=resolve_timezone(self.workspace_tz))
        return {
            "name": data.name,
            "due": due.astimezone(timezone.utc) if due else None,
            "content": data.content,
            "status": data.status,
            "recurrence": recurrence.value if recurrence else None,
        }
