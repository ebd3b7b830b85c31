"""Note Schemas — reorder payload and note create/read shapes.

Invariants:
    - Reorder positions are strict non-negative integers ("2" or 2.5 are rejected)
    - movedNoteId must parse as a UUID
    - NoteCreate.name and content are stripped and non-empty
    - NoteUpdate carries no position: edits never reorder

Design Decisions:
    - Field aliases keep the client's camelCase names on the wire while Python code
      uses snake_case
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReorderNotesRequest(BaseModel):
    """Drag-reorder of one note within its category."""
    model_config = ConfigDict(populate_by_name=True)

    moved_note_id: UUID = Field(alias="movedNoteId")
    position_to: int = Field(alias="positionMovedTo", ge=0, strict=True)
    position_from: int = Field(alias="positionMovedFrom", ge=0, strict=True)


class NoteCreate(BaseModel):
    """Note creation — appended at the end of its category."""
    name: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=50_000)

    @field_validator("name", "content")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class NoteUpdate(BaseModel):
    """Edit of a note's title and body; its position is never touched here."""
    name: str = Field(min_length=1, max_length=200)
    content: str | None = Field(None, max_length=50_000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class NoteResponse(BaseModel):
    """Note as listed in its category."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category_id: UUID
    name: str
    content: str | None
    position: int
    created_at: datetime
