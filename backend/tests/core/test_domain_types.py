"""Domain Types — verifies identity wrappers and recurrence normalization."""

from uuid import uuid4

import pytest

from taskboard.core.domain_types import (
    CategoryId, NoteId, TaskId, UserId, Recurrence, normalize_recurrence,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert TaskId(uid) == NoteId(uid) == CategoryId(uid) == UserId(uid) == uid


def test_recurrence_has_two_rules():
    assert {r.value for r in Recurrence} == {"daily", "workday"}


@pytest.mark.parametrize("raw,expected", [
    ("daily", Recurrence.DAILY),
    ("workday", Recurrence.WORKDAY),
    (Recurrence.WORKDAY, Recurrence.WORKDAY),
])
def test_normalize_recognized_values(raw, expected):
    assert normalize_recurrence(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "Daily", "weekly", "none"])
def test_normalize_unrecognized_values_to_none(raw):
    assert normalize_recurrence(raw) is None
