"""Task Store — SQLAlchemy implementation of the TaskStore protocol.

Invariants:
    - Every read and write is scoped by owner: a foreign task is indistinguishable
      from a missing one
    - for_update=True issues SELECT ... FOR UPDATE (row lock held until commit/rollback)
    - Never commits: the caller's unit of work owns the transaction boundary
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import CategoryId, TaskId, UserId
from taskboard.models.category import Category
from taskboard.models.task import Task


class SqlTaskStore:
    """Task persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(
        self, task_id: TaskId, owner_id: UserId, for_update: bool = False,
    ) -> Task | None:
        query = select(Task).where(Task.id == task_id, Task.user_id == owner_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def update_by_id(
        self, task_id: TaskId, owner_id: UserId, **fields: object,
    ) -> int:
        result = await self.db.execute(
            update(Task)
            .where(Task.id == task_id, Task.user_id == owner_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def add(self, task: Task) -> Task:
        self.db.add(task)
        await self.db.flush()
        return task

    async def get_category(
        self, category_id: CategoryId, owner_id: UserId,
    ) -> Category | None:
        result = await self.db.execute(
            select(Category).where(
                Category.id == category_id, Category.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()
