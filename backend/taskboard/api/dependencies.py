"""Request Dependencies — caller identity, clock, and handler factories.

Invariants:
    - Identity comes only from X-User-Id, set by the upstream auth layer
    - Missing or malformed identity → UnauthorizedError (401), before payload checks
    - Handlers receive the clock and workspace timezone explicitly

Design Decisions:
    - Header seam over cookie/session parsing: authentication is a separate concern,
      this service trusts the gateway in front of it
    - get_clock overridable in tests via app.dependency_overrides
"""

from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.config import Settings, get_settings
from taskboard.core.domain_types import UserId
from taskboard.core.errors import UnauthorizedError
from taskboard.core.repository_protocols import Clock
from taskboard.infrastructure.clock import get_clock
from taskboard.infrastructure.database import get_db
from taskboard.services.handle_notes import NoteHandlers
from taskboard.services.handle_tasks import TaskHandlers


async def get_current_user_id(
    x_user_id: str | None = Header(None),
) -> UserId:
    """Caller identity or 401."""
    if not x_user_id:
        raise UnauthorizedError()
    try:
        return UserId(UUID(x_user_id))
    except ValueError:
        raise UnauthorizedError()


async def get_task_handlers(
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> TaskHandlers:
    return TaskHandlers(db, clock, settings.workspace_timezone)


async def get_note_handlers(
    db: AsyncSession = Depends(get_db),
) -> NoteHandlers:
    return NoteHandlers(db)
