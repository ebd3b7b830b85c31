"""Task Lifecycle — pure (status, due) transitions for status toggles and reschedules.

Invariants:
    - Completing a recurring task never leaves it completed: status resets to False
      and due advances via next_after_completion
    - Non-recurring tasks (or toggles to False) only change status; due is untouched
    - Reschedule is only defined for recurring tasks (InvalidOperationError otherwise)
    - Every plan is a single dict of column changes, applied as one atomic write

Design Decisions:
    - Planner returns the change set, shell persists it (ADR: functional core, imperative shell)
    - Works on any object exposing status/due/recurrence: ORM rows and test doubles alike
"""

from datetime import datetime, tzinfo

from taskboard.core.domain_types import normalize_recurrence
from taskboard.core.errors import InvalidOperationError
from taskboard.core.recurrence import next_after_completion, next_for_manual_reschedule
from taskboard.core.repository_protocols import TaskLike


def plan_status_change(
    task: TaskLike, value: bool, now: datetime, tz: str | tzinfo | None,
) -> dict:
    """Column changes for setting a task's status to value."""
    recurrence = normalize_recurrence(task.recurrence)
    if value and recurrence:
        return {
            "status": False,
            "due": next_after_completion(task.due, recurrence, now, tz),
        }
    return {"status": value}


def plan_reschedule(task: TaskLike, now: datetime, tz: str | tzinfo | None) -> dict:
    """Column changes for pushing a recurring task to today or its next occurrence."""
    recurrence = normalize_recurrence(task.recurrence)
    if not recurrence:
        raise InvalidOperationError("Task is not recurring")
    return {
        "status": False,
        "due": next_for_manual_reschedule(task.due, recurrence, now, tz),
    }


def check_recurrence_has_due(recurrence: str | None, due: datetime | None) -> None:
    """A recognized recurrence requires a due date."""
    if normalize_recurrence(recurrence) and due is None:
        raise InvalidOperationError("Recurring tasks require a due date")
