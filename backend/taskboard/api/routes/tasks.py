"""Task Routes — status toggle, manual reschedule, create and update.

Invariants:
    - All endpoints require caller identity (401 otherwise)
    - Unknown and foreign tasks/categories both answer 404
    - Status and reschedule answer 204 with no body

Design Decisions:
    - Paths kept from the dashboard client (/update-task-status, /reschedule-task)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from taskboard.api.dependencies import get_current_user_id, get_task_handlers
from taskboard.core.domain_types import CategoryId, TaskId, UserId
from taskboard.schemas.task import TaskRef, TaskResponse, TaskWrite, UpdateTaskStatus
from taskboard.services.handle_tasks import TaskHandlers

router = APIRouter(prefix="/api/v1", tags=["tasks"])


@router.post(
    "/update-task-status", status_code=status.HTTP_204_NO_CONTENT,
)
async def update_task_status(
    body: UpdateTaskStatus,
    user_id: UserId = Depends(get_current_user_id),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    """Set a task's status; completing a recurring task moves it to its next occurrence."""
    await handlers.update_status(user_id, TaskId(body.id), body.value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/reschedule-task", status_code=status.HTTP_204_NO_CONTENT,
)
async def reschedule_task(
    body: TaskRef,
    user_id: UserId = Depends(get_current_user_id),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    """Push a recurring task to today (if its time has not passed) or the next day."""
    await handlers.reschedule(user_id, TaskId(body.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/categories/{category_id}/tasks", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    category_id: UUID,
    body: TaskWrite,
    user_id: UserId = Depends(get_current_user_id),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    task = await handlers.create(user_id, CategoryId(category_id), body)
    return TaskResponse.model_validate(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    body: TaskWrite,
    user_id: UserId = Depends(get_current_user_id),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    task = await handlers.update(user_id, TaskId(task_id), body)
    return TaskResponse.model_validate(task)
