"""Earnings statistics over a teacher's classes."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import date, datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from zabanyar.core.enums import ClassStatusEnum
from zabanyar.shared.utils import month_key, previous_month

Period = Literal["all", "this_month", "last_month", "this_year"]

TOP_STUDENTS = 5


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def in_period(class_date: date, period: Period, today: date) -> bool:
    if period == "all":
        return True
    if period == "this_month":
        return (class_date.year, class_date.month) == (today.year, today.month)
    if period == "last_month":
        return (class_date.year, class_date.month) == previous_month(today.year, today.month)
    if period == "this_year":
        return class_date.year == today.year
    raise ValueError(f"Unknown period: {period}")


def filter_by_period(classes: Iterable, period: Period, today: date) -> list:
    return [item for item in classes if in_period(_as_date(item.class_date), period, today)]


def earnings_stats(
    classes: Iterable,
    today: date,
    student_name: Callable[[UUID], str] | None = None,
) -> dict:
    """Totals, this/last month sums, per-month breakdown and top students.

    Every class counts toward earnings regardless of status; only the
    completed counter looks at status.
    """
    total = Decimal(0)
    this_month = Decimal(0)
    last_month = Decimal(0)
    total_classes = 0
    completed = 0
    monthly: dict[str, dict] = defaultdict(lambda: {"earnings": Decimal(0), "classes": 0})
    per_student: dict[UUID, dict] = {}
    last_year, last_month_number = previous_month(today.year, today.month)

    for item in classes:
        amount = Decimal(item.amount or 0)
        class_date = _as_date(item.class_date)
        total += amount
        total_classes += 1
        if item.status == ClassStatusEnum.COMPLETED:
            completed += 1
        if (class_date.year, class_date.month) == (today.year, today.month):
            this_month += amount
        if (class_date.year, class_date.month) == (last_year, last_month_number):
            last_month += amount

        bucket = monthly[month_key(class_date)]
        bucket["earnings"] += amount
        bucket["classes"] += 1

        student = per_student.setdefault(
            item.student_id,
            {
                "student_id": item.student_id,
                "student_name": student_name(item.student_id) if student_name else "",
                "total_spent": Decimal(0),
                "class_count": 0,
            },
        )
        student["total_spent"] += amount
        student["class_count"] += 1

    top_students = sorted(per_student.values(), key=lambda row: row["total_spent"], reverse=True)
    return {
        "total_earnings": total,
        "this_month_earnings": this_month,
        "last_month_earnings": last_month,
        "total_classes": total_classes,
        "completed_classes": completed,
        "average_per_class": (total / total_classes) if total_classes else Decimal(0),
        "top_students": top_students[:TOP_STUDENTS],
        "monthly_data": [
            {"month": key, "earnings": value["earnings"], "classes": value["classes"]}
            for key, value in sorted(monthly.items())
        ],
    }
