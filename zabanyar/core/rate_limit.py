"""Sliding-window rate limiters for auth endpoints (in-memory and Redis)."""

from __future__ import annotations

import asyncio
import math
import time
from collections import defaultdict, deque
from collections.abc import Callable
from typing import Any, Protocol
from uuid import uuid4

from zabanyar.core.config import Settings, get_settings


class RateLimiter(Protocol):
    """Common contract for limiter backends."""

    async def acquire(
        self,
        key: str,
        *,
        max_requests: int,
        window_seconds: int,
    ) -> tuple[bool, int]:
        """Reserve one request slot; return (allowed, retry_after_seconds)."""

    async def clear(self) -> None:
        """Drop tracked counters."""

    async def ping(self) -> bool:
        """Whether the backend can take requests right now."""


_REDIS_ACQUIRE_SCRIPT = """
local key = KEYS[1]
local now = tonumber(ARGV[1])
local window = tonumber(ARGV[2])
local limit = tonumber(ARGV[3])
local member = ARGV[4]

redis.call('ZREMRANGEBYSCORE', key, '-inf', now - window)
if redis.call('ZCARD', key) >= limit then
  local oldest = redis.call('ZRANGE', key, 0, 0, 'WITHSCORES')
  local oldest_score = now
  if oldest[2] ~= nil then
    oldest_score = tonumber(oldest[2])
  end
  return {0, oldest_score}
end

redis.call('ZADD', key, now, member)
redis.call('EXPIRE', key, math.ceil(window))
return {1, 0}
"""


def _retry_after(oldest_event: float, window_seconds: int, now: float) -> int:
    return max(1, math.ceil((oldest_event + window_seconds) - now))


class InMemorySlidingWindowRateLimiter:
    """Single-process limiter keeping event timestamps per key."""

    def __init__(self, now_provider: Callable[[], float] | None = None) -> None:
        self._events: dict[str, deque[float]] = defaultdict(deque)
        self._lock = asyncio.Lock()
        self._now = now_provider

    def _current_time(self) -> float:
        if self._now is not None:
            return self._now()
        return asyncio.get_running_loop().time()

    async def acquire(
        self,
        key: str,
        *,
        max_requests: int,
        window_seconds: int,
    ) -> tuple[bool, int]:
        now = self._current_time()
        async with self._lock:
            events = self._events[key]
            while events and events[0] <= now - window_seconds:
                events.popleft()

            if len(events) >= max_requests:
                return False, _retry_after(events[0], window_seconds, now)

            events.append(now)
            return True, 0

    async def clear(self) -> None:
        async with self._lock:
            self._events.clear()

    async def ping(self) -> bool:
        return True


class RedisSlidingWindowRateLimiter:
    """Limiter shared across app instances through a Redis sorted set."""

    def __init__(
        self,
        *,
        redis_url: str,
        namespace: str,
        now_provider: Callable[[], float] | None = None,
    ) -> None:
        self._redis_url = redis_url
        self._namespace = namespace
        self._now = now_provider
        self._init_lock = asyncio.Lock()
        self._client: Any | None = None
        self._acquire_script: Any | None = None

    def _current_time(self) -> float:
        if self._now is not None:
            return self._now()
        return time.time()

    async def _ensure_initialized(self) -> None:
        if self._client is not None and self._acquire_script is not None:
            return

        async with self._init_lock:
            if self._client is None:
                from redis.asyncio import from_url

                self._client = from_url(self._redis_url, encoding="utf-8", decode_responses=True)
            if self._acquire_script is None:
                self._acquire_script = self._client.register_script(_REDIS_ACQUIRE_SCRIPT)

    async def acquire(
        self,
        key: str,
        *,
        max_requests: int,
        window_seconds: int,
    ) -> tuple[bool, int]:
        await self._ensure_initialized()
        now = self._current_time()
        allowed, oldest = await self._acquire_script(
            keys=[f"{self._namespace}:{key}"],
            args=[now, window_seconds, max_requests, f"{now}:{uuid4().hex}"],
        )
        if int(allowed):
            return True, 0
        return False, _retry_after(float(oldest), window_seconds, now)

    async def clear(self) -> None:
        await self._ensure_initialized()
        cursor: int = 0
        while True:
            cursor, keys = await self._client.scan(
                cursor=cursor,
                match=f"{self._namespace}:*",
                count=100,
            )
            if keys:
                await self._client.delete(*keys)
            if int(cursor) == 0:
                break

    async def ping(self) -> bool:
        await self._ensure_initialized()
        return bool(await self._client.ping())


_rate_limiter: RateLimiter | None = None
_rate_limiter_signature: tuple[str, str | None, str] | None = None


def _build_rate_limiter(settings: Settings) -> RateLimiter:
    if settings.auth_rate_limit_backend == "redis":
        return RedisSlidingWindowRateLimiter(
            redis_url=settings.redis_url or "",
            namespace=settings.auth_rate_limit_redis_namespace,
        )
    return InMemorySlidingWindowRateLimiter()


def get_rate_limiter() -> RateLimiter:
    """Return shared limiter instance, rebuilt when backend settings change."""
    global _rate_limiter, _rate_limiter_signature
    settings = get_settings()
    signature = (
        settings.auth_rate_limit_backend,
        settings.redis_url,
        settings.auth_rate_limit_redis_namespace,
    )
    if _rate_limiter is None or _rate_limiter_signature != signature:
        _rate_limiter = _build_rate_limiter(settings)
        _rate_limiter_signature = signature
    return _rate_limiter
