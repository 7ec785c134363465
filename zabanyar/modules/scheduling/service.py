"""Scheduling business logic layer."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.scheduling import grid
from zabanyar.modules.scheduling.repository import SchedulingRepository
from zabanyar.modules.scheduling.schemas import ScheduleConsistency, ScheduleGrid, ScheduleSlot
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.shared.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class SchedulingService:
    """Weekly schedule template of a teacher."""

    def __init__(self, repository: SchedulingRepository, teachers_repository: TeachersRepository) -> None:
        self.repository = repository
        self.teachers_repository = teachers_repository

    async def _get_teacher(self, teacher_id: UUID):
        teacher = await self.teachers_repository.get_teacher_by_id(teacher_id)
        if teacher is None:
            raise NotFoundException("Teacher not found")
        return teacher

    @staticmethod
    def _to_grid(teacher_id: UUID, slots: list[grid.GridSlot]) -> ScheduleGrid:
        return ScheduleGrid(
            teacher_id=teacher_id,
            days=list(grid.DAYS),
            time_slots=list(grid.TIME_SLOTS),
            slots=[ScheduleSlot.model_validate(slot) for slot in slots],
            available_count=sum(1 for slot in slots if slot.is_available),
        )

    async def get_grid(self, teacher_id: UUID) -> ScheduleGrid:
        await self._get_teacher(teacher_id)
        stored = await self.repository.list_for_teacher(teacher_id)
        return self._to_grid(teacher_id, grid.merge_grid(stored))

    async def _replace(self, teacher_id: UUID, slots: Iterable[grid.GridSlot]) -> ScheduleGrid:
        # one row per (day, start_time); a repeated cell keeps its last value
        cells = {(slot.day, slot.start_time): slot for slot in slots}
        available = [slot for slot in cells.values() if slot.is_available]
        await self.repository.delete_for_teacher(teacher_id)
        if available:
            await self.repository.insert_slots(teacher_id, available)
        logger.info("Saved schedule for teacher %s with %s available slots", teacher_id, len(available))
        return self._to_grid(teacher_id, grid.merge_grid(available))

    async def replace_schedule(self, teacher_id: UUID, slots: list[ScheduleSlot], actor) -> ScheduleGrid:
        """Drop the stored template and keep only the available cells sent."""
        teacher = await self._get_teacher(teacher_id)
        ensure_self_or_admin(actor, teacher.id)
        cells = [
            grid.GridSlot(
                day=slot.day,
                start_time=slot.start_time,
                end_time=slot.end_time or grid.next_hour(slot.start_time),
                is_available=slot.is_available,
            )
            for slot in slots
        ]
        return await self._replace(teacher_id, cells)

    async def apply_preset(self, teacher_id: UUID, preset: str, actor) -> ScheduleGrid:
        teacher = await self._get_teacher(teacher_id)
        ensure_self_or_admin(actor, teacher.id)
        stored = await self.repository.list_for_teacher(teacher_id)
        return await self._replace(teacher_id, grid.apply_preset(grid.merge_grid(stored), preset))

    async def consistency(self, teacher_id: UUID) -> ScheduleConsistency:
        teacher = await self._get_teacher(teacher_id)
        stored = await self.repository.list_for_teacher(teacher_id)
        report = grid.consistency_report(stored, teacher.available_days)
        if not report["consistent"]:
            logger.warning(
                "Schedule drift for teacher %s: schedule-only=%s profile-only=%s",
                teacher_id,
                report["only_in_schedule"],
                report["only_in_profile"],
            )
        return ScheduleConsistency(teacher_id=teacher_id, **report)


async def get_scheduling_service(session: AsyncSession = Depends(get_db_session)) -> SchedulingService:
    """Dependency provider for scheduling service."""
    return SchedulingService(SchedulingRepository(session), TeachersRepository(session))
