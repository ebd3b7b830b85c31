"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Category is the ownership scope; tasks and notes reference it by category_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from taskboard.models.category import Category  # noqa: F401
from taskboard.models.task import Task  # noqa: F401
from taskboard.models.note import Note  # noqa: F401
