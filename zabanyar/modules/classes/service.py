"""Class sessions: listings, earnings statistics and video-call hand-off."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import ClassStatusEnum
from zabanyar.modules.classes import stats
from zabanyar.modules.classes.models import ClassSession
from zabanyar.modules.classes.repository import ClassesRepository
from zabanyar.modules.classes.schemas import ClassCreate, ClassRead, EarningsStats, VideoCallEnded, VideoRoom
from zabanyar.modules.identity.service import ensure_self_or_admin, is_admin
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.shared.exceptions import BusinessRuleException, NotFoundException, UnauthorizedException
from zabanyar.shared.utils import utc_now

logger = logging.getLogger(__name__)


class ClassesService:
    """Classes domain service."""

    def __init__(self, repository: ClassesRepository, teachers_repository: TeachersRepository) -> None:
        self.repository = repository
        self.teachers_repository = teachers_repository

    async def create_class(self, payload: ClassCreate, actor) -> ClassSession:
        ensure_self_or_admin(actor, payload.teacher_id)
        return await self.repository.create_class(**payload.model_dump())

    async def list_for_teacher(self, teacher_id: UUID, period: stats.Period, actor) -> list[ClassSession]:
        ensure_self_or_admin(actor, teacher_id)
        classes = await self.repository.list_classes(teacher_id=teacher_id)
        return stats.filter_by_period(classes, period, utc_now().date())

    async def list_for_student(self, student_id: UUID, actor) -> list[ClassSession]:
        ensure_self_or_admin(actor, student_id)
        return await self.repository.list_classes(student_id=student_id)

    async def earnings(self, teacher_id: UUID, period: stats.Period, actor) -> EarningsStats:
        """Statistics over all classes; ``period`` only narrows the returned list."""
        ensure_self_or_admin(actor, teacher_id)
        teacher = await self.teachers_repository.get_teacher_by_id(teacher_id)
        if teacher is None:
            raise NotFoundException("Teacher not found")

        classes = await self.repository.list_classes(teacher_id=teacher_id)
        today = utc_now().date()
        names = {item.student_id: item.student.full_name for item in classes if item.student is not None}
        summary = stats.earnings_stats(classes, today, student_name=lambda key: names.get(key, ""))
        return EarningsStats(
            teacher_id=teacher_id,
            period=period,
            average_rating=teacher.average_rating,
            classes=[ClassRead.model_validate(item) for item in stats.filter_by_period(classes, period, today)],
            **summary,
        )

    async def _get_participant_class(self, class_id: UUID, actor) -> ClassSession:
        item = await self.repository.get_class_by_id(class_id)
        if item is None:
            raise NotFoundException("Class not found")
        if actor.id not in (item.teacher_id, item.student_id) and not is_admin(actor):
            raise UnauthorizedException("Only class participants can join the call")
        return item

    async def start_call(self, class_id: UUID, actor) -> VideoRoom:
        item = await self._get_participant_class(class_id, actor)
        if item.status not in (ClassStatusEnum.SCHEDULED, ClassStatusEnum.IN_PROGRESS):
            raise BusinessRuleException(f"Cannot start a call for a {item.status} class")
        if item.status == ClassStatusEnum.SCHEDULED:
            item = await self.repository.set_status(item, ClassStatusEnum.IN_PROGRESS)
            logger.info("Class %s started by %s", class_id, actor.id)

        is_teacher = actor.id == item.teacher_id
        return VideoRoom(
            class_id=item.id,
            room_name=f"zabanyar-class-{item.id}",
            participant_role="teacher" if is_teacher else "student",
            peer_id=item.student_id if is_teacher else item.teacher_id,
            status=item.status,
        )

    async def end_call(self, class_id: UUID, actor) -> VideoCallEnded:
        item = await self._get_participant_class(class_id, actor)
        if item.status != ClassStatusEnum.IN_PROGRESS:
            raise BusinessRuleException("Class is not in progress")
        item = await self.repository.set_status(item, ClassStatusEnum.COMPLETED)
        logger.info("Class %s completed", class_id)
        if actor.id == item.student_id:
            redirect_to = f"/students/{item.student_id}"
        else:
            redirect_to = f"/teachers/{item.teacher_id}"
        return VideoCallEnded(class_id=item.id, status=item.status, redirect_to=redirect_to)


async def get_classes_service(session: AsyncSession = Depends(get_db_session)) -> ClassesService:
    """Dependency provider for classes service."""
    return ClassesService(ClassesRepository(session), TeachersRepository(session))
