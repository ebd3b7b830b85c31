"""Note Routes — drag reorder plus the writers that must respect dense ordering.

Invariants:
    - POST /reorder-notes answers 204; from == to is a no-op 204 even for unknown ids
    - Created notes land at the end of their category; deletes close the gap
    - Edits change name and content only, never position
    - Listing is ordered by position, then name

Design Decisions:
    - Reorder path and camelCase payload kept from the dashboard client
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from taskboard.api.dependencies import get_note_handlers
from taskboard.core.domain_types import CategoryId, NoteId
from taskboard.schemas.note import (
    NoteCreate, NoteResponse, NoteUpdate, ReorderNotesRequest,
)
from taskboard.services.handle_notes import NoteHandlers

router = APIRouter(prefix="/api/v1", tags=["notes"])


@router.post("/reorder-notes", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_notes(
    body: ReorderNotesRequest,
    handlers: NoteHandlers = Depends(get_note_handlers),
):
    """Move one note to a new slot and shift the notes in between."""
    await handlers.reorder(
        NoteId(body.moved_note_id), body.position_from, body.position_to,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/categories/{category_id}/notes", response_model=list[NoteResponse],
)
async def list_notes(
    category_id: UUID,
    q: str | None = Query(None, max_length=200),
    handlers: NoteHandlers = Depends(get_note_handlers),
):
    search = q.strip() if q else None
    notes = await handlers.list_notes(CategoryId(category_id), search or None)
    return [NoteResponse.model_validate(n) for n in notes]


@router.post(
    "/categories/{category_id}/notes", response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    category_id: UUID,
    body: NoteCreate,
    handlers: NoteHandlers = Depends(get_note_handlers),
):
    note = await handlers.create(CategoryId(category_id), body.name, body.content)
    return NoteResponse.model_validate(note)


@router.put("/notes/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    body: NoteUpdate,
    handlers: NoteHandlers = Depends(get_note_handlers),
):
    note = await handlers.update(NoteId(note_id), body.name, body.content)
    return NoteResponse.model_validate(note)


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    handlers: NoteHandlers = Depends(get_note_handlers),
):
    await handlers.delete(NoteId(note_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
