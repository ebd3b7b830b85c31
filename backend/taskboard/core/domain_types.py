"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId, NoteId, CategoryId, UserId wrap UUIDs — never use bare UUID in domain logic
    - Recurrence is a closed set; unknown stored values normalize to None (non-recurring)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Recurrence: the DB column stores the raw value, JSON serializes natively
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", UUID)
NoteId = NewType("NoteId", UUID)
CategoryId = NewType("CategoryId", UUID)
UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Recurrence(str, Enum):
    """Recognized recurrence rules — maps to the tasks.recurrence column."""
    DAILY = "daily"
    WORKDAY = "workday"


def normalize_recurrence(value: str | None) -> Recurrence | None:
    """Stored recurrence → Recurrence, or None when absent/unrecognized."""
    if isinstance(value, Recurrence):
        return value
    try:
        return Recurrence(value)
    except ValueError:
        return None
