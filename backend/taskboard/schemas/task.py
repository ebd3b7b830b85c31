"""Task Schemas — status toggle, reschedule, and create/update payloads.

Invariants:
    - Task id accepted as "id" or "taskId"
    - UpdateTaskStatus.value must be a JSON boolean (no "true" strings, no 0/1)
    - recurrence is free text here; unrecognized values are stored as absent

Design Decisions:
    - "recurring task needs a due date" is checked in core/task_lifecycle, not here:
      the same rule guards every writer, not only this schema
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TaskRef(BaseModel):
    """Reschedule payload — just the task id."""
    id: UUID = Field(validation_alias=AliasChoices("id", "taskId"))


class UpdateTaskStatus(TaskRef):
    """Status toggle payload."""
    value: bool = Field(strict=True)


class TaskWrite(BaseModel):
    """Task create/update form."""
    name: str = Field(min_length=1, max_length=200)
    due: datetime | None = None
    content: str | None = Field(None, max_length=50_000)
    status: bool = False
    recurrence: str | None = Field(None, max_length=20)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("recurrence", mode="before")
    @classmethod
    def blank_recurrence_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class TaskResponse(BaseModel):
    """Task as returned after create/update."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category_id: UUID
    name: str
    status: bool
    due: datetime | None
    recurrence: str | None
    content: str | None
