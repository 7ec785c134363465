"""Scheduling repository layer."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.modules.scheduling.grid import GridSlot
from zabanyar.modules.scheduling.models import TeacherSchedule


class SchedulingRepository:
    """DB access for scheduling domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_for_teacher(self, teacher_id: UUID) -> list[TeacherSchedule]:
        stmt = (
            select(TeacherSchedule)
            .where(TeacherSchedule.teacher_id == teacher_id)
            .order_by(TeacherSchedule.day.asc(), TeacherSchedule.start_time.asc())
        )
        return list((await self.session.scalars(stmt)).all())

    async def delete_for_teacher(self, teacher_id: UUID) -> None:
        await self.session.execute(delete(TeacherSchedule).where(TeacherSchedule.teacher_id == teacher_id))

    async def insert_slots(self, teacher_id: UUID, slots: Iterable[GridSlot]) -> list[TeacherSchedule]:
        rows = [
            TeacherSchedule(
                teacher_id=teacher_id,
                day=slot.day,
                start_time=slot.start_time,
                end_time=slot.end_time,
                is_available=slot.is_available,
            )
            for slot in slots
        ]
        self.session.add_all(rows)
        await self.session.flush()
        return rows
