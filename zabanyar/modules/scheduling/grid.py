"""Weekly availability grid: 7 days x 15 hourly slots."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from zabanyar.core.enums import WeekdayEnum

DAYS: tuple[str, ...] = tuple(day.value for day in WeekdayEnum)
TIME_SLOTS: tuple[str, ...] = tuple(f"{hour:02d}:00" for hour in range(8, 23))

PRESETS: dict[str, tuple[str, ...]] = {
    "morning": ("08:00", "09:00", "10:00", "11:00", "12:00"),
    "afternoon": ("13:00", "14:00", "15:00", "16:00", "17:00"),
    "evening": ("18:00", "19:00", "20:00", "21:00", "22:00"),
    "full": TIME_SLOTS,
}


def next_hour(start_time: str) -> str:
    """'21:00' -> '22:00'; wraps past midnight."""
    hour, minute = start_time.split(":")
    return f"{(int(hour) + 1) % 24:02d}:{minute}"


@dataclass(frozen=True)
class GridSlot:
    day: str
    start_time: str
    end_time: str
    is_available: bool = False


def default_grid() -> list[GridSlot]:
    return [
        GridSlot(day=day, start_time=start, end_time=next_hour(start))
        for day in DAYS
        for start in TIME_SLOTS
    ]


def merge_grid(stored: Iterable) -> list[GridSlot]:
    """Full grid where stored rows override the unavailable defaults."""
    by_key = {(row.day, row.start_time): row for row in stored}
    merged = []
    for slot in default_grid():
        row = by_key.get((slot.day, slot.start_time))
        if row is None:
            merged.append(slot)
        else:
            merged.append(
                GridSlot(
                    day=row.day,
                    start_time=row.start_time,
                    end_time=row.end_time,
                    is_available=bool(row.is_available),
                ),
            )
    return merged


def apply_preset(grid: Iterable[GridSlot], preset: str) -> list[GridSlot]:
    """Mark preset hours available on every day and everything else unavailable."""
    try:
        hours = PRESETS[preset]
    except KeyError:
        raise ValueError(f"Unknown schedule preset: {preset}") from None
    return [replace(slot, is_available=slot.start_time in hours) for slot in grid]


def available_days(slots: Iterable) -> set[str]:
    return {slot.day for slot in slots if slot.is_available}


def consistency_report(slots: Iterable, profile_days: Iterable[str] | None) -> dict:
    """Compare schedule days against the teacher profile's ``available_days``.

    The two sources are maintained independently; this only reports drift.
    """
    schedule_days = available_days(slots)
    profile = {day.lower() for day in profile_days or ()}
    only_schedule = sorted(schedule_days - profile, key=_day_order)
    only_profile = sorted(profile - schedule_days, key=_day_order)
    return {
        "schedule_days": sorted(schedule_days, key=_day_order),
        "profile_days": sorted(profile, key=_day_order),
        "only_in_schedule": only_schedule,
        "only_in_profile": only_profile,
        "consistent": not only_schedule and not only_profile,
    }


def _day_order(day: str) -> int:
    return DAYS.index(day) if day in DAYS else len(DAYS)
