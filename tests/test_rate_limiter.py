from __future__ import annotations

from types import SimpleNamespace

import pytest

from zabanyar.core import rate_limit as rate_limit_module
from zabanyar.core.rate_limit import InMemorySlidingWindowRateLimiter


class FakeRedisLimiter:
    def __init__(self, *, redis_url: str, namespace: str) -> None:
        self.redis_url = redis_url
        self.namespace = namespace

    async def acquire(self, key: str, *, max_requests: int, window_seconds: int) -> tuple[bool, int]:
        return True, 0

    async def clear(self) -> None:
        return None

    async def ping(self) -> bool:
        return True


def _reset_cached_limiter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(rate_limit_module, "_rate_limiter", None)
    monkeypatch.setattr(rate_limit_module, "_rate_limiter_signature", None)


@pytest.mark.asyncio
async def test_sliding_window_blocks_after_limit_and_recovers() -> None:
    clock = [100.0]
    limiter = InMemorySlidingWindowRateLimiter(now_provider=lambda: clock[0])

    results = [await limiter.acquire("identity:register:1.1.1.1", max_requests=2, window_seconds=10) for _ in range(3)]

    assert results == [(True, 0), (True, 0), (False, 10)]

    clock[0] = 110.01
    assert await limiter.acquire("identity:register:1.1.1.1", max_requests=2, window_seconds=10) == (True, 0)


@pytest.mark.asyncio
async def test_keys_are_counted_separately() -> None:
    limiter = InMemorySlidingWindowRateLimiter(now_provider=lambda: 50.0)

    await limiter.acquire("identity:login:1.1.1.1", max_requests=1, window_seconds=60)
    blocked, retry_after = await limiter.acquire("identity:login:1.1.1.1", max_requests=1, window_seconds=60)
    other_allowed, _ = await limiter.acquire("identity:login:2.2.2.2", max_requests=1, window_seconds=60)

    assert blocked is False
    assert retry_after == 60
    assert other_allowed is True


@pytest.mark.asyncio
async def test_clear_drops_all_counters() -> None:
    limiter = InMemorySlidingWindowRateLimiter(now_provider=lambda: 200.0)

    await limiter.acquire("identity:refresh:1.1.1.1", max_requests=1, window_seconds=60)
    await limiter.clear()

    assert await limiter.acquire("identity:refresh:1.1.1.1", max_requests=1, window_seconds=60) == (True, 0)


def test_get_rate_limiter_uses_redis_backend_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = SimpleNamespace(
        auth_rate_limit_backend="redis",
        redis_url="redis://redis:6379/0",
        auth_rate_limit_redis_namespace="zabanyar_auth",
    )
    monkeypatch.setattr(rate_limit_module, "get_settings", lambda: settings)
    monkeypatch.setattr(rate_limit_module, "RedisSlidingWindowRateLimiter", FakeRedisLimiter)
    _reset_cached_limiter(monkeypatch)

    limiter = rate_limit_module.get_rate_limiter()

    assert isinstance(limiter, FakeRedisLimiter)
    assert limiter.redis_url == "redis://redis:6379/0"
    assert limiter.namespace == "zabanyar_auth"


def test_get_rate_limiter_is_cached_until_settings_change(monkeypatch: pytest.MonkeyPatch) -> None:
    state = {"backend": "memory", "redis_url": None}

    def _settings() -> SimpleNamespace:
        return SimpleNamespace(
            auth_rate_limit_backend=state["backend"],
            redis_url=state["redis_url"],
            auth_rate_limit_redis_namespace="auth_rate_limit",
        )

    monkeypatch.setattr(rate_limit_module, "get_settings", _settings)
    monkeypatch.setattr(rate_limit_module, "RedisSlidingWindowRateLimiter", FakeRedisLimiter)
    _reset_cached_limiter(monkeypatch)

    first = rate_limit_module.get_rate_limiter()
    assert rate_limit_module.get_rate_limiter() is first

    state["backend"] = "redis"
    state["redis_url"] = "redis://redis:6379/1"
    second = rate_limit_module.get_rate_limiter()

    assert second is not first
    assert isinstance(second, FakeRedisLimiter)


@pytest.mark.asyncio
async def test_in_memory_limiter_is_always_reachable() -> None:
    assert await InMemorySlidingWindowRateLimiter().ping() is True
