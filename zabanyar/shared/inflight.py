"""Per-key re-entrancy guard for fetch-heavy handlers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from zabanyar.shared.exceptions import ConflictException

logger = logging.getLogger(__name__)


class InFlightGuard:
    """Reject a second concurrent run for the same key instead of queueing it.

    This is a plain flag per key, not a scheduler: callers that lose the race
    get ``ConflictException`` and are expected to retry later.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._active: set[str] = set()
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        async with self._lock:
            if key in self._active:
                logger.info("%s already in flight for %s", self.name, key)
                raise ConflictException(f"{self.name} is already running for this user")
            self._active.add(key)
        try:
            yield
        finally:
            self._active.discard(key)
