from __future__ import annotations

import pytest
from fastapi import HTTPException

import zabanyar.main as main_module


def _check(result: bool):
    async def _check() -> bool:
        return result

    return _check


class FailingLimiter:
    async def ping(self) -> bool:
        raise ConnectionError("redis is down")


@pytest.mark.asyncio
async def test_healthcheck_is_static() -> None:
    assert await main_module.healthcheck() == {"status": "ok"}


@pytest.mark.asyncio
async def test_ready_when_database_and_limiter_answer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "_is_database_ready", _check(True))
    monkeypatch.setattr(main_module, "_is_rate_limiter_ready", _check(True))

    response = await main_module.readiness_check()

    assert response["status"] == "ready"
    assert response["database"] == "ok"
    assert response["rate_limiter"] == "ok"
    assert response["rate_limit_backend"] == main_module.settings.auth_rate_limit_backend
    assert "timestamp" in response


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("database", "limiter", "detail"),
    [
        (False, True, "Not ready: database"),
        (True, False, "Not ready: rate_limiter"),
        (False, False, "Not ready: database, rate_limiter"),
    ],
)
async def test_not_ready_names_every_failing_dependency(
    monkeypatch: pytest.MonkeyPatch,
    database: bool,
    limiter: bool,
    detail: str,
) -> None:
    monkeypatch.setattr(main_module, "_is_database_ready", _check(database))
    monkeypatch.setattr(main_module, "_is_rate_limiter_ready", _check(limiter))

    with pytest.raises(HTTPException) as exc:
        await main_module.readiness_check()

    assert exc.value.status_code == 503
    assert exc.value.detail == detail


@pytest.mark.asyncio
async def test_limiter_errors_count_as_not_ready(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "get_rate_limiter", lambda: FailingLimiter())

    assert await main_module._is_rate_limiter_ready() is False
