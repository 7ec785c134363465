from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import UUID, uuid4

import pytest

import zabanyar.modules.classes.service as classes_service_module
from zabanyar.core.enums import ClassStatusEnum, PaymentStatusEnum, RoleEnum
from zabanyar.modules.classes import stats
from zabanyar.modules.classes.service import ClassesService
from zabanyar.shared.exceptions import BusinessRuleException, NotFoundException, UnauthorizedException

FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_class(
    class_date: date,
    amount: str,
    *,
    teacher_id: UUID | None = None,
    student_id: UUID | None = None,
    status: ClassStatusEnum = ClassStatusEnum.COMPLETED,
    student_name: str = "",
) -> SimpleNamespace:
    return SimpleNamespace(
        id=uuid4(),
        teacher_id=teacher_id or uuid4(),
        student_id=student_id or uuid4(),
        class_date=class_date,
        class_time="18:00",
        duration=60,
        amount=Decimal(amount),
        status=status,
        payment_status=PaymentStatusEnum.PAID,
        subject=None,
        notes=None,
        created_at=FIXED_NOW,
        student=SimpleNamespace(full_name=student_name) if student_name else None,
    )


def make_actor(user_id: UUID, role: RoleEnum = RoleEnum.TEACHER) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, role=SimpleNamespace(name=role))


class FakeClassesRepository:
    def __init__(self, *classes: SimpleNamespace) -> None:
        self.classes = {item.id: item for item in classes}

    async def get_class_by_id(self, class_id: UUID):
        return self.classes.get(class_id)

    async def list_classes(self, *, teacher_id: UUID | None = None, student_id: UUID | None = None):
        return [
            item
            for item in self.classes.values()
            if (teacher_id is None or item.teacher_id == teacher_id)
            and (student_id is None or item.student_id == student_id)
        ]

    async def set_status(self, item: SimpleNamespace, status: ClassStatusEnum) -> SimpleNamespace:
        item.status = status
        return item


class FakeTeachersRepository:
    def __init__(self, teacher_id: UUID) -> None:
        self.teacher = SimpleNamespace(id=teacher_id, average_rating=4.5)

    async def get_teacher_by_id(self, teacher_id: UUID):
        return self.teacher if teacher_id == self.teacher.id else None


@pytest.mark.parametrize(
    ("class_date", "period", "expected"),
    [
        (date(2025, 12, 31), "last_month", True),
        (date(2025, 12, 31), "this_year", False),
        (date(2026, 1, 1), "this_month", True),
        (date(2025, 1, 20), "this_month", False),
        (date(2020, 6, 1), "all", True),
    ],
)
def test_in_period_handles_year_boundary(class_date: date, period: str, expected: bool) -> None:
    assert stats.in_period(class_date, period, FIXED_NOW.date()) is expected


def test_in_period_rejects_unknown_period() -> None:
    with pytest.raises(ValueError):
        stats.in_period(FIXED_NOW.date(), "fortnight", FIXED_NOW.date())


def test_earnings_stats_counts_every_class_and_splits_months() -> None:
    regular, occasional = uuid4(), uuid4()
    classes = [
        make_class(date(2026, 1, 10), "300000", student_id=regular),
        make_class(date(2026, 1, 12), "300000", student_id=regular, status=ClassStatusEnum.SCHEDULED),
        make_class(date(2025, 12, 20), "200000", student_id=occasional),
        make_class(date(2025, 11, 2), "100000", student_id=occasional, status=ClassStatusEnum.CANCELLED),
    ]
    names = {regular: "Sara", occasional: "Reza"}

    summary = stats.earnings_stats(classes, FIXED_NOW.date(), student_name=names.__getitem__)

    assert summary["total_earnings"] == Decimal("900000")
    assert summary["this_month_earnings"] == Decimal("600000")
    assert summary["last_month_earnings"] == Decimal("200000")
    assert summary["total_classes"] == 4
    assert summary["completed_classes"] == 2
    assert summary["average_per_class"] == Decimal("225000")
    assert [row["month"] for row in summary["monthly_data"]] == ["2025-11", "2025-12", "2026-01"]
    assert summary["monthly_data"][-1] == {"month": "2026-01", "earnings": Decimal("600000"), "classes": 2}
    assert [(row["student_name"], row["class_count"]) for row in summary["top_students"]] == [
        ("Sara", 2),
        ("Reza", 2),
    ]


def test_earnings_stats_without_classes_is_zero() -> None:
    summary = stats.earnings_stats([], FIXED_NOW.date())

    assert summary["total_classes"] == 0
    assert summary["average_per_class"] == Decimal(0)
    assert summary["top_students"] == []
    assert summary["monthly_data"] == []


def test_top_students_are_capped() -> None:
    classes = [make_class(date(2026, 1, 3), str(1000 * (index + 1))) for index in range(stats.TOP_STUDENTS + 2)]

    summary = stats.earnings_stats(classes, FIXED_NOW.date())

    assert len(summary["top_students"]) == stats.TOP_STUDENTS
    assert summary["top_students"][0]["total_spent"] == Decimal("7000")


@pytest.mark.asyncio
async def test_earnings_period_filters_list_but_not_totals(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(classes_service_module, "utc_now", lambda: FIXED_NOW)
    teacher_id = uuid4()
    current = make_class(date(2026, 1, 5), "300000", teacher_id=teacher_id, student_name="Ali")
    previous = make_class(date(2025, 12, 5), "300000", teacher_id=teacher_id, student_name="Mina")
    service = ClassesService(FakeClassesRepository(current, previous), FakeTeachersRepository(teacher_id))

    result = await service.earnings(teacher_id, "this_month", make_actor(teacher_id))

    assert result.total_earnings == Decimal("600000")
    assert result.average_rating == 4.5
    assert [item.id for item in result.classes] == [current.id]
    assert {row.student_name for row in result.top_students} == {"Ali", "Mina"}


@pytest.mark.asyncio
async def test_earnings_of_another_teacher_is_rejected() -> None:
    teacher_id = uuid4()
    service = ClassesService(FakeClassesRepository(), FakeTeachersRepository(teacher_id))

    with pytest.raises(UnauthorizedException):
        await service.earnings(teacher_id, "all", make_actor(uuid4()))
    with pytest.raises(NotFoundException):
        await service.earnings(uuid4(), "all", make_actor(uuid4(), RoleEnum.ADMIN))


@pytest.mark.asyncio
async def test_video_call_lifecycle_for_participants() -> None:
    teacher_id, student_id = uuid4(), uuid4()
    item = make_class(
        date(2026, 1, 15),
        "300000",
        teacher_id=teacher_id,
        student_id=student_id,
        status=ClassStatusEnum.SCHEDULED,
    )
    service = ClassesService(FakeClassesRepository(item), FakeTeachersRepository(teacher_id))

    room = await service.start_call(item.id, make_actor(student_id, RoleEnum.STUDENT))
    assert room.status == ClassStatusEnum.IN_PROGRESS
    assert room.participant_role == "student"
    assert room.peer_id == teacher_id

    teacher_room = await service.start_call(item.id, make_actor(teacher_id))
    assert teacher_room.participant_role == "teacher"
    assert teacher_room.room_name == room.room_name

    ended = await service.end_call(item.id, make_actor(teacher_id))
    assert ended.status == ClassStatusEnum.COMPLETED
    assert ended.redirect_to == f"/teachers/{teacher_id}"

    with pytest.raises(BusinessRuleException):
        await service.start_call(item.id, make_actor(teacher_id))
    with pytest.raises(BusinessRuleException):
        await service.end_call(item.id, make_actor(teacher_id))


@pytest.mark.asyncio
async def test_outsiders_cannot_join_a_call() -> None:
    teacher_id = uuid4()
    item = make_class(date(2026, 1, 15), "0", teacher_id=teacher_id, status=ClassStatusEnum.SCHEDULED)
    service = ClassesService(FakeClassesRepository(item), FakeTeachersRepository(teacher_id))

    with pytest.raises(UnauthorizedException):
        await service.start_call(item.id, make_actor(uuid4(), RoleEnum.STUDENT))
    with pytest.raises(NotFoundException):
        await service.start_call(uuid4(), make_actor(teacher_id))
    assert item.status == ClassStatusEnum.SCHEDULED
