from __future__ import annotations

import pytest

from zabanyar.modules.identity.messages import (
    GENERIC_REGISTRATION_ERROR,
    friendly_auth_error,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("User already registered", "این ایمیل قبلاً ثبت شده است"),
        ("Account with this email already exists", "این ایمیل قبلاً ثبت شده است"),
        ("Invalid email", "ایمیل وارد شده معتبر نیست"),
        ("Password should be at least 6 characters", "رمز عبور باید حداقل 6 کاراکتر باشد"),
        ("Email RATE LIMIT EXCEEDED", "تعداد درخواست‌های ایمیل بیش از حد مجاز است"),
    ],
)
def test_known_auth_errors_are_translated(raw: str, expected: str) -> None:
    assert friendly_auth_error(raw) == expected


def test_unknown_errors_pass_through_unchanged() -> None:
    assert friendly_auth_error("Database is down") == "Database is down"


@pytest.mark.parametrize("raw", [None, ""])
def test_empty_error_falls_back_to_generic_message(raw: str | None) -> None:
    assert friendly_auth_error(raw) == GENERIC_REGISTRATION_ERROR
