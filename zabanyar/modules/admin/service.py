"""Admin business logic layer."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import BookingStatusEnum, RoleEnum, TeacherStatusEnum
from zabanyar.modules.admin.models import AdminAction
from zabanyar.modules.admin.repository import AdminRepository
from zabanyar.modules.admin.schemas import PlatformStats
from zabanyar.modules.booking.repository import BookingRepository
from zabanyar.modules.identity.models import User
from zabanyar.modules.students.repository import StudentsRepository
from zabanyar.modules.students.service import StudentsService
from zabanyar.modules.teachers.models import Teacher
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.modules.teachers.service import TeachersService
from zabanyar.shared.exceptions import UnauthorizedException
from zabanyar.shared.utils import utc_now

logger = logging.getLogger(__name__)

REVIEW_ACTIONS = {
    TeacherStatusEnum.APPROVED: "teacher.approve",
    TeacherStatusEnum.REJECTED: "teacher.reject",
}


def _ensure_admin(actor: User, what: str) -> None:
    if actor.role.name != RoleEnum.ADMIN:
        raise UnauthorizedException(f"Only admin can {what}")


class AdminService:
    """Admin domain service."""

    def __init__(
        self,
        repository: AdminRepository,
        teachers_service: TeachersService,
        students_service: StudentsService,
        booking_repository: BookingRepository,
    ) -> None:
        self.repository = repository
        self.teachers_service = teachers_service
        self.students_service = students_service
        self.booking_repository = booking_repository

    async def review_teacher(
        self,
        teacher_id: UUID,
        status: TeacherStatusEnum,
        actor: User,
        *,
        reason: str | None = None,
    ) -> tuple[Teacher, AdminAction]:
        """Approve or reject a teacher and journal the decision."""
        _ensure_admin(actor, "review teachers")
        teacher = await self.teachers_service.get_teacher(teacher_id)
        previous = teacher.status
        teacher = await self.teachers_service.set_status(teacher_id, status)
        action = await self.repository.create_action(
            admin_id=actor.id,
            action=REVIEW_ACTIONS[status],
            target_type="teacher",
            target_id=str(teacher_id),
            payload={"from": str(previous), "to": str(status), "reason": reason},
        )
        logger.info("Admin %s set teacher %s to %s", actor.id, teacher_id, status)
        return teacher, action

    async def list_pending_teachers(self, actor: User, limit: int, offset: int) -> tuple[list[Teacher], int]:
        _ensure_admin(actor, "list pending teachers")
        return await self.teachers_service.list_pending(limit=limit, offset=offset)

    async def list_actions(
        self,
        actor: User,
        *,
        teacher_id: UUID | None,
        limit: int,
        offset: int,
    ) -> tuple[list[AdminAction], int]:
        """Journal entries, or only the review history of one teacher."""
        _ensure_admin(actor, "list admin actions")
        return await self.repository.list_actions(
            target_type="teacher" if teacher_id is not None else None,
            target_id=teacher_id,
            limit=limit,
            offset=offset,
        )

    async def platform_stats(self, actor: User) -> PlatformStats:
        _ensure_admin(actor, "view platform stats")
        teacher_counts = await self.teachers_service.count_by_status()
        booking_counts = await self.booking_repository.count_by_status()
        return PlatformStats(
            generated_at=utc_now(),
            teachers_total=sum(teacher_counts.values()),
            teachers_by_status={str(item): teacher_counts.get(item, 0) for item in TeacherStatusEnum},
            students_total=await self.students_service.count_students(),
            bookings_total=sum(booking_counts.values()),
            bookings_by_status={str(item): booking_counts.get(item, 0) for item in BookingStatusEnum},
            booking_revenue=await self.booking_repository.total_revenue(),
        )


async def get_admin_service(session: AsyncSession = Depends(get_db_session)) -> AdminService:
    """Dependency provider for admin service."""
    return AdminService(
        AdminRepository(session),
        TeachersService(TeachersRepository(session)),
        StudentsService(StudentsRepository(session)),
        BookingRepository(session),
    )
