from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import UUID, uuid4

import pytest

from zabanyar.core.enums import BookingStatusEnum, ClassStatusEnum, RoleEnum
from zabanyar.modules.dashboard import analytics
from zabanyar.modules.dashboard.service import DashboardService
from zabanyar.shared.exceptions import ConflictException, UnauthorizedException
from zabanyar.shared.inflight import InFlightGuard

BASE_TIME = datetime(2026, 10, 1, 8, 0, tzinfo=timezone.utc)


@dataclass
class FakeBooking:
    student_id: UUID | None
    status: BookingStatusEnum
    created_at: datetime


@dataclass
class FakeClass:
    class_date: date
    status: ClassStatusEnum
    amount: Decimal | None


def _booking(student_id: UUID | None, status: BookingStatusEnum, minutes: int = 0) -> FakeBooking:
    return FakeBooking(student_id=student_id, status=status, created_at=BASE_TIME + timedelta(minutes=minutes))


def test_teacher_analytics_counts_students_and_statuses() -> None:
    ali, sara = uuid4(), uuid4()
    bookings = [
        _booking(ali, BookingStatusEnum.COMPLETED),
        _booking(ali, BookingStatusEnum.CONFIRMED),
        _booking(sara, BookingStatusEnum.PENDING),
        _booking(sara, BookingStatusEnum.SCHEDULED),
        _booking(None, BookingStatusEnum.CANCELLED),
        _booking(sara, BookingStatusEnum.COMPLETED),
    ]

    result = analytics.teacher_analytics(bookings, 4.5)

    assert result == {
        "total_students": 3,
        "active_students": 2,
        "total_classes": 6,
        "completed_classes": 2,
        "confirmed_classes": 2,
        "pending_requests": 1,
        "upcoming_classes": 2,
        "completion_rate": 33,
        "monthly_growth": 8,
        "average_rating": 4.5,
    }


def test_teacher_analytics_caps_growth_and_handles_no_bookings() -> None:
    confirmed = [_booking(uuid4(), BookingStatusEnum.CONFIRMED) for _ in range(7)]

    assert analytics.teacher_analytics(confirmed, None)["monthly_growth"] == 25
    empty = analytics.teacher_analytics([], None)
    assert empty["completion_rate"] == 0
    assert empty["average_rating"] == 0


def test_upcoming_bookings_are_oldest_open_first() -> None:
    bookings = [
        _booking(uuid4(), BookingStatusEnum.CONFIRMED, minutes=50),
        _booking(uuid4(), BookingStatusEnum.COMPLETED, minutes=1),
        _booking(uuid4(), BookingStatusEnum.PENDING, minutes=10),
        _booking(uuid4(), BookingStatusEnum.SCHEDULED, minutes=30),
        _booking(uuid4(), BookingStatusEnum.PENDING, minutes=40),
        _booking(uuid4(), BookingStatusEnum.PENDING, minutes=20),
    ]

    upcoming = analytics.upcoming_bookings(bookings)

    assert [item.created_at.minute for item in upcoming] == [10, 20, 30, 40]


def test_student_analytics_sums_current_month_spend() -> None:
    classes = [
        FakeClass(date(2026, 10, 3), ClassStatusEnum.COMPLETED, Decimal("300000.00")),
        FakeClass(date(2026, 10, 20), ClassStatusEnum.SCHEDULED, Decimal("250000.00")),
        FakeClass(date(2026, 9, 28), ClassStatusEnum.COMPLETED, Decimal("300000.00")),
        FakeClass(date(2025, 10, 5), ClassStatusEnum.CANCELLED, None),
    ]

    result = analytics.student_analytics(classes, today=date(2026, 10, 19))

    assert result == {
        "total_classes": 4,
        "completed_classes": 2,
        "this_month_classes": 2,
        "this_month_spent": Decimal("550000.00"),
    }


@pytest.mark.asyncio
async def test_inflight_guard_rejects_second_concurrent_run() -> None:
    guard = InFlightGuard("dashboard")
    entered = asyncio.Event()
    release = asyncio.Event()

    async def _slow() -> None:
        async with guard.hold("teacher:1"):
            entered.set()
            await release.wait()

    task = asyncio.create_task(_slow())
    await entered.wait()

    with pytest.raises(ConflictException):
        async with guard.hold("teacher:1"):
            pass
    async with guard.hold("teacher:2"):
        pass

    release.set()
    await task
    async with guard.hold("teacher:1"):
        pass


@pytest.mark.asyncio
async def test_inflight_guard_releases_key_after_error() -> None:
    guard = InFlightGuard("dashboard")

    with pytest.raises(RuntimeError):
        async with guard.hold("student:1"):
            raise RuntimeError("fetch failed")

    async with guard.hold("student:1"):
        pass


def _dashboard_service(guard: InFlightGuard) -> DashboardService:
    unused = SimpleNamespace()
    return DashboardService(unused, unused, unused, unused, unused, guard=guard)


@pytest.mark.asyncio
async def test_teacher_dashboard_is_owner_only() -> None:
    service = _dashboard_service(InFlightGuard("dashboard"))
    stranger = SimpleNamespace(id=uuid4(), role=SimpleNamespace(name=RoleEnum.TEACHER))

    with pytest.raises(UnauthorizedException):
        await service.teacher_dashboard(uuid4(), stranger)


@pytest.mark.asyncio
async def test_dashboard_refuses_overlapping_refresh_for_same_user() -> None:
    guard = InFlightGuard("dashboard")
    service = _dashboard_service(guard)
    student_id = uuid4()
    actor = SimpleNamespace(id=student_id, role=SimpleNamespace(name=RoleEnum.STUDENT))

    async with guard.hold(f"student:{student_id}"):
        with pytest.raises(ConflictException):
            await service.student_dashboard(student_id, actor)
