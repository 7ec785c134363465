"""Aggregates shown on the teacher and student dashboards."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import Decimal

from zabanyar.core.enums import BookingStatusEnum, ClassStatusEnum

ACTIVE_BOOKING_STATUSES = frozenset({BookingStatusEnum.CONFIRMED, BookingStatusEnum.COMPLETED})
CONFIRMED_BOOKING_STATUSES = frozenset({BookingStatusEnum.CONFIRMED, BookingStatusEnum.SCHEDULED})
UPCOMING_BOOKING_STATUSES = CONFIRMED_BOOKING_STATUSES | {BookingStatusEnum.PENDING}

UPCOMING_LIMIT = 4
RECENT_BOOKINGS_LIMIT = 5
MAX_MONTHLY_GROWTH = 25


def teacher_analytics(bookings: Sequence, average_rating: float | None) -> dict:
    total = len(bookings)
    completed = sum(1 for item in bookings if item.status == BookingStatusEnum.COMPLETED)
    confirmed = sum(1 for item in bookings if item.status in CONFIRMED_BOOKING_STATUSES)
    pending = sum(1 for item in bookings if item.status == BookingStatusEnum.PENDING)
    return {
        "total_students": len({item.student_id for item in bookings}),
        "active_students": len({item.student_id for item in bookings if item.status in ACTIVE_BOOKING_STATUSES}),
        "total_classes": total,
        "completed_classes": completed,
        "confirmed_classes": confirmed,
        "pending_requests": pending,
        "upcoming_classes": confirmed,
        "completion_rate": round(completed / total * 100) if total else 0,
        "monthly_growth": min(MAX_MONTHLY_GROWTH, confirmed * 4),
        "average_rating": average_rating or 0,
    }


def upcoming_bookings(bookings: Iterable, limit: int = UPCOMING_LIMIT) -> list:
    """Oldest open bookings first."""
    open_items = [item for item in bookings if item.status in UPCOMING_BOOKING_STATUSES]
    return sorted(open_items, key=lambda item: item.created_at)[:limit]


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def student_analytics(classes: Sequence, today: date) -> dict:
    this_month = [
        item
        for item in classes
        if (_as_date(item.class_date).year, _as_date(item.class_date).month) == (today.year, today.month)
    ]
    return {
        "total_classes": len(classes),
        "completed_classes": sum(1 for item in classes if item.status == ClassStatusEnum.COMPLETED),
        "this_month_classes": len(this_month),
        "this_month_spent": sum((Decimal(item.amount or 0) for item in this_month), Decimal(0)),
    }
