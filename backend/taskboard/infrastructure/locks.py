"""Keyed Locks — single writer per category / per task inside one process.

Invariants:
    - Two holders of the same key never run concurrently
    - Different keys never block each other
    - A key's lock lives only while someone holds or awaits it (no unbounded growth)

Design Decisions:
    - asyncio.Lock per key over one global lock: reorders in different categories
      proceed in parallel
    - Complements, not replaces, row locks (SELECT ... FOR UPDATE): row locks serialize
      across worker processes on Postgres, this serializes within a process and on
      SQLite, where FOR UPDATE is a no-op
    - Module-level registries: deliberate shared state, one per event loop process
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Hashable


class KeyedLocks:
    """Registry of asyncio.Lock objects addressed by key."""

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._holders: dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


category_locks = KeyedLocks()
task_locks = KeyedLocks()
