"""Recurrence Engine — pure next-due computation for recurring tasks.

Invariants:
    - Pure and total: no I/O, no ambient clock, never raises for valid datetimes
    - "now" and the workspace timezone are always explicit parameters
    - next_after_completion(...) > now, always
    - WORKDAY results never fall on Saturday or Sunday in the given timezone
    - The template's time-of-day (down to the microsecond) survives every date change
    - Naive datetimes are read as UTC (SQLite hands them back without tzinfo)

Design Decisions:
    - Calendar arithmetic on local wall time: aware datetime + timedelta(days=1) keeps
      the wall clock, so a DST switch never shifts the due time-of-day
    - Per-rule skip predicates instead of inline branching: a new rule adds one entry
      to _SKIP_DAY, the anchoring logic stays untouched
    - Results returned in UTC: storage stays zone-agnostic
    - "Past or not" is decided on instants, never on local wall time: two datetimes
      sharing a ZoneInfo compare by wall clock and ignore fold, which is wrong in
      the repeated hour of a DST fall-back
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from taskboard.core.domain_types import Recurrence

DEFAULT_TIMEZONE = "UTC"

_ONE_DAY = timedelta(days=1)


def _is_weekend(value: datetime) -> bool:
    return value.weekday() >= 5


# Days a rule must never land on, evaluated on local wall time.
_SKIP_DAY: dict[Recurrence, Callable[[datetime], bool]] = {
    Recurrence.DAILY: lambda value: False,
    Recurrence.WORKDAY: _is_weekend,
}


def resolve_timezone(name: str | tzinfo | None) -> tzinfo:
    """IANA name → tzinfo. Blank or unknown names fall back to UTC."""
    if isinstance(name, tzinfo):
        return name
    cleaned = (name or "").strip()
    if not cleaned:
        return timezone.utc
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _instant(value: datetime) -> datetime:
    return value.astimezone(timezone.utc)


def _anchor(
    current_due: datetime | None, now: datetime, tz: tzinfo,
) -> datetime:
    """Template kept if not past; else today (or tomorrow) at its time-of-day."""
    now_utc = _as_aware(now).astimezone(timezone.utc)
    now_local = now_utc.astimezone(tz)
    template = _as_aware(current_due or now).astimezone(tz)
    if _instant(template) >= now_utc:
        return template
    adjusted = template.replace(
        year=now_local.year, month=now_local.month, day=now_local.day,
    )
    if _instant(adjusted) < now_utc:
        adjusted = adjusted + _ONE_DAY
    return adjusted


def _skip_forward(candidate: datetime, recurrence: Recurrence) -> datetime:
    skip = _SKIP_DAY[recurrence]
    while skip(candidate):
        candidate = candidate + _ONE_DAY
    return candidate


def next_after_completion(
    current_due: datetime | None,
    recurrence: Recurrence,
    now: datetime,
    tz: str | tzinfo | None = DEFAULT_TIMEZONE,
) -> datetime:
    """Next due date after a recurring task is completed.

    Always at least one calendar day past the anchor, so a task finished today
    is never rescheduled for today.
    """
    zone = resolve_timezone(tz)
    candidate = _anchor(current_due, now, zone) + _ONE_DAY
    return _skip_forward(candidate, recurrence).astimezone(timezone.utc)


def next_for_manual_reschedule(
    current_due: datetime | None,
    recurrence: Recurrence,
    now: datetime,
    tz: str | tzinfo | None = DEFAULT_TIMEZONE,
) -> datetime:
    """Due date for an explicit "push to today or next workday" action.

    Offers today at the task's time-of-day when that instant has not passed,
    tomorrow otherwise; WORKDAY rolls forward past weekends.
    """
    zone = resolve_timezone(tz)
    candidate = _anchor(current_due, now, zone)
    return _skip_forward(candidate, recurrence).astimezone(timezone.utc)
