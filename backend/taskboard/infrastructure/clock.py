"""System Clock — production implementation of the core Clock protocol.

Invariants:
    - now() is always timezone-aware UTC

Design Decisions:
    - The only place the wall clock is read; routes receive it through get_clock so
      tests can swap in a fixed instant
"""

from datetime import datetime, timezone


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


_system_clock = SystemClock()


def get_clock() -> SystemClock:
    """FastAPI dependency for the current clock."""
    return _system_clock
