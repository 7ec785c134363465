from __future__ import annotations

import pytest
from pydantic import ValidationError

from zabanyar.core.config import Settings


def test_placeholder_secret_key_allowed_in_development() -> None:
    settings = Settings(_env_file=None, app_env="development", secret_key="change-me")
    assert settings.secret_key == "change-me"


@pytest.mark.parametrize("secret_key", ["change-me", "change-me-in-production"])
def test_placeholder_secret_key_rejected_in_production(secret_key: str) -> None:
    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            app_env="production",
            secret_key=secret_key,
            auth_rate_limit_allow_in_memory_in_production=True,
        )


def test_in_memory_rate_limiter_requires_explicit_ack_in_production() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, app_env="prod", secret_key="super-secure-value")


def test_redis_backend_requires_redis_url() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, auth_rate_limit_backend="REDIS")


def test_comma_separated_tuple_settings_are_parsed() -> None:
    settings = Settings(
        _env_file=None,
        avatar_allowed_content_types="image/png, image/webp,",
        auth_rate_limit_trusted_proxy_ips="10.0.0.1",
    )

    assert settings.avatar_allowed_content_types == ("image/png", "image/webp")
    assert settings.auth_rate_limit_trusted_proxy_ips == ("10.0.0.1",)


def test_booking_commission_rate_must_be_a_fraction() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, booking_commission_rate=1.5)


def test_defaults_match_platform_rules() -> None:
    settings = Settings(_env_file=None)

    assert settings.app_name == "Zabanyar"
    assert settings.booking_commission_rate == 0.10
    assert settings.avatar_max_bytes == 5 * 1024 * 1024
    assert settings.writing_page_size == 10
