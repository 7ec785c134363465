"""Shared utility functions."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Normalize datetime to UTC timezone."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def month_key(value: date) -> str:
    """Return ``YYYY-MM`` bucket for a date or datetime."""
    return f"{value.year}-{value.month:02d}"


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the calendar month before the given one."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def same_month(value: date, reference: date) -> bool:
    """True when both dates fall in the same calendar month."""
    return value.year == reference.year and value.month == reference.month


def none_if_empty(value):
    """Collapse empty strings and empty lists to None before persisting."""
    if value in ("", [], None):
        return None
    return value
