"""Payload validation — reorder positions, task status value, task id aliases.

Invariants:
    - Reorder positions are strict non-negative integers
    - Status value must be a real boolean
    - Task id accepted as "id" or "taskId"
    - Blank recurrence normalizes to None
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from taskboard.schemas.note import NoteCreate, ReorderNotesRequest
from taskboard.schemas.task import TaskRef, TaskWrite, UpdateTaskStatus


# --- ReorderNotesRequest ------------------------------------------------------

def test_reorder_reads_camel_case_fields():
    note_id = uuid4()
    req = ReorderNotesRequest.model_validate({
        "movedNoteId": str(note_id), "positionMovedFrom": 0, "positionMovedTo": 2,
    })
    assert (req.moved_note_id, req.position_from, req.position_to) == (note_id, 0, 2)


@pytest.mark.parametrize("position", [-1, "1", 1.5, True, None])
def test_reorder_rejects_non_integer_positions(position):
    with pytest.raises(ValidationError):
        ReorderNotesRequest.model_validate({
            "movedNoteId": str(uuid4()), "positionMovedFrom": 0,
            "positionMovedTo": position,
        })


def test_reorder_rejects_malformed_note_id():
    with pytest.raises(ValidationError):
        ReorderNotesRequest.model_validate({
            "movedNoteId": "note-1", "positionMovedFrom": 0, "positionMovedTo": 1,
        })


# --- Task payloads ------------------------------------------------------------

def test_task_ref_accepts_task_id_alias():
    task_id = uuid4()
    assert TaskRef.model_validate({"taskId": str(task_id)}).id == task_id
    assert TaskRef.model_validate({"id": str(task_id)}).id == task_id


@pytest.mark.parametrize("value", ["true", 1, 0, None])
def test_status_value_must_be_boolean(value):
    with pytest.raises(ValidationError):
        UpdateTaskStatus.model_validate({"id": str(uuid4()), "value": value})


def test_blank_recurrence_is_none():
    assert TaskWrite(name="Read", recurrence="  ").recurrence is None


def test_task_name_is_stripped():
    assert TaskWrite(name="  Read  ").name == "Read"


def test_note_whitespace_content_rejected():
    with pytest.raises(ValidationError):
        NoteCreate(name="Idea", content="   ")
