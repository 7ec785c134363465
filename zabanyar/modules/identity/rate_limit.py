"""Rate-limit dependencies for identity endpoints."""

from __future__ import annotations

from fastapi import Request

from zabanyar.core.config import get_settings
from zabanyar.core.rate_limit import get_rate_limiter
from zabanyar.modules.identity.messages import RATE_LIMIT_HINT, friendly_auth_error
from zabanyar.shared.exceptions import RateLimitException

_DEFAULT_TRUSTED_PROXIES = ("127.0.0.1", "::1")


def _trusted_proxy_ips(settings) -> set[str]:
    raw_value = getattr(settings, "auth_rate_limit_trusted_proxy_ips", _DEFAULT_TRUSTED_PROXIES)
    if isinstance(raw_value, str):
        raw_value = raw_value.split(",")
    return {str(value).strip() for value in raw_value or () if str(value).strip()}


def resolve_client_ip(request: Request, *, trusted_proxy_ips: set[str]) -> str:
    """Client address, honouring X-Forwarded-For only behind a trusted proxy."""
    client_ip = request.client.host if request.client and request.client.host else "unknown"
    forwarded_for = request.headers.get("x-forwarded-for")
    if not forwarded_for or client_ip not in trusted_proxy_ips:
        return client_ip
    return forwarded_for.split(",")[0].strip() or client_ip


async def _enforce_limit(request: Request, *, action: str, limit_setting: str) -> None:
    settings = get_settings()
    client_ip = resolve_client_ip(request, trusted_proxy_ips=_trusted_proxy_ips(settings))
    allowed, retry_after = await get_rate_limiter().acquire(
        f"identity:{action}:{client_ip}",
        max_requests=getattr(settings, limit_setting),
        window_seconds=settings.auth_rate_limit_window_seconds,
    )
    if not allowed:
        raise RateLimitException(
            friendly_auth_error("rate limit exceeded"),
            details={"action": action, "retry_after": retry_after, "hint": RATE_LIMIT_HINT},
        )


async def enforce_register_rate_limit(request: Request) -> None:
    await _enforce_limit(request, action="register", limit_setting="auth_rate_limit_register_requests")


async def enforce_login_rate_limit(request: Request) -> None:
    await _enforce_limit(request, action="login", limit_setting="auth_rate_limit_login_requests")


async def enforce_refresh_rate_limit(request: Request) -> None:
    await _enforce_limit(request, action="refresh", limit_setting="auth_rate_limit_refresh_requests")
