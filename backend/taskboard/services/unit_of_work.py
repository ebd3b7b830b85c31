"""Unit of Work — all-or-nothing commit boundary for multi-step writes.

Invariants:
    - Body succeeds → exactly one commit; body fails → rollback, nothing persists
    - SQLAlchemy errors leave as PersistenceError with committed=False (rolled back)
      or committed=None (commit itself failed, outcome unknown)
    - Domain errors raised in the body propagate unchanged after rollback
    - Failures are logged with entity context; callers only see a generic message

Design Decisions:
    - Context manager over decorator: one service method may run a short read
      outside the unit before taking its lock
"""

import logging
from contextlib import asynccontextmanager, suppress
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.errors import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def unit_of_work(
    db: AsyncSession, operation: str, **log_context: object,
) -> AsyncIterator[AsyncSession]:
    """Run the body in one transaction; commit on success, roll back on any failure."""
    try:
        yield db
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Failed to {operation}, rolled back: {e}",
            extra={"operation": operation, "committed": False, **log_context},
        )
        raise PersistenceError(operation, committed=False) from e
    except BaseException:
        await db.rollback()
        raise

    try:
        await db.commit()
    except SQLAlchemyError as e:
        with suppress(SQLAlchemyError):
            await db.rollback()
        logger.error(
            f"Commit failed to {operation}, outcome unknown: {e}",
            extra={"operation": operation, **log_context},
        )
        raise PersistenceError(operation, committed=None) from e
