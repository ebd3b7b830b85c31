"""Reschedule Task — POST /api/v1/reschedule-task end to end.

Tests cover:
    - Overdue task moves to today when its time-of-day is still ahead
    - Otherwise it moves to tomorrow
    - Workday tasks never land on a weekend
    - Status is reset to incomplete
    - Non-recurring task → 400, unknown/foreign → 404, no identity → 401
"""

from datetime import datetime, timezone
from uuid import uuid4

URL = "/api/v1/reschedule-task"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


async def test_overdue_task_moves_to_today_when_time_ahead(
    client, auth, clock, make_task, read_task,
):
    clock.instant = utc(2024, 1, 2, 8, 0)
    task = await make_task(due=utc(2024, 1, 1, 9, 0), recurrence="daily")
    res = await client.post(URL, json={"id": str(task.id)}, headers=auth)
    assert res.status_code == 204
    assert await read_task(task.id) == (False, utc(2024, 1, 2, 9, 0))


async def test_overdue_task_moves_to_tomorrow_when_time_passed(
    client, auth, clock, make_task, read_task,
):
    clock.instant = utc(2024, 1, 2, 10, 0)
    task = await make_task(due=utc(2024, 1, 1, 9, 0), recurrence="daily")
    res = await client.post(URL, json={"taskId": str(task.id)}, headers=auth)
    assert res.status_code == 204
    assert await read_task(task.id) == (False, utc(2024, 1, 3, 9, 0))


async def test_workday_task_on_weekend_moves_to_monday(
    client, auth, clock, make_task, read_task,
):
    clock.instant = utc(2024, 1, 6, 12, 0)
    task = await make_task(due=utc(2024, 1, 4, 9, 0), recurrence="workday")
    await client.post(URL, json={"id": str(task.id)}, headers=auth)
    _, due = await read_task(task.id)
    assert due == utc(2024, 1, 8, 9, 0)


async def test_reschedule_reopens_completed_task(
    client, auth, clock, make_task, read_task,
):
    clock.instant = utc(2024, 1, 2, 8, 0)
    task = await make_task(due=utc(2024, 1, 1, 9, 0), recurrence="daily", status=True)
    await client.post(URL, json={"id": str(task.id)}, headers=auth)
    status, _ = await read_task(task.id)
    assert status is False


async def test_non_recurring_task_returns_400(client, auth, make_task, read_task):
    task = await make_task(due=utc(2024, 1, 1, 9, 0))
    res = await client.post(URL, json={"id": str(task.id)}, headers=auth)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_OPERATION"
    assert await read_task(task.id) == (False, utc(2024, 1, 1, 9, 0))


async def test_missing_id_returns_400(client, auth):
    res = await client.post(URL, json={}, headers=auth)
    assert res.status_code == 400


async def test_unauthenticated_returns_401(client, make_task):
    task = await make_task(due=utc(2024, 1, 1, 9, 0), recurrence="daily")
    res = await client.post(URL, json={"id": str(task.id)})
    assert res.status_code == 401


async def test_foreign_task_returns_404(client, make_task):
    task = await make_task(due=utc(2024, 1, 1, 9, 0), recurrence="daily")
    res = await client.post(
        URL, json={"id": str(task.id)}, headers={"X-User-Id": str(uuid4())},
    )
    assert res.status_code == 404
