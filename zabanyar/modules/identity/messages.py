"""Persian user-facing messages for known auth failures."""

from __future__ import annotations

GENERIC_REGISTRATION_ERROR = "خطا در ثبت‌نام"
RATE_LIMIT_HINT = "لطفاً 60 دقیقه صبر کنید یا از Google OAuth استفاده کنید"

# Substring (lower-cased) -> Persian message. First match wins.
_KNOWN_AUTH_ERRORS: tuple[tuple[str, str], ...] = (
    ("user already registered", "این ایمیل قبلاً ثبت شده است"),
    ("already exists", "این ایمیل قبلاً ثبت شده است"),
    ("invalid email", "ایمیل وارد شده معتبر نیست"),
    ("password should be at least", "رمز عبور باید حداقل 6 کاراکتر باشد"),
    ("rate limit exceeded", "تعداد درخواست‌های ایمیل بیش از حد مجاز است"),
    ("too many", "تعداد درخواست‌های ایمیل بیش از حد مجاز است"),
)


def friendly_auth_error(message: str | None) -> str:
    """Map raw auth error text to a Persian message; unknown text passes through."""
    if not message:
        return GENERIC_REGISTRATION_ERROR
    lowered = message.lower()
    for needle, persian in _KNOWN_AUTH_ERRORS:
        if needle in lowered:
            return persian
    return message
