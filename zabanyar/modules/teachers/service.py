"""Teachers business logic layer."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import TeacherStatusEnum
from zabanyar.modules.identity.service import ensure_self_or_admin, is_admin
from zabanyar.modules.teachers.models import Teacher
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.modules.teachers.schemas import TeacherUpdate
from zabanyar.shared.exceptions import NotFoundException, UnauthorizedException, ValidationException
from zabanyar.shared.utils import utc_now

logger = logging.getLogger(__name__)

PUBLIC_STATUSES = (TeacherStatusEnum.APPROVED, TeacherStatusEnum.ACTIVE)
ADMIN_ONLY_FIELDS = frozenset({"status", "average_rating"})


def display_status(status: TeacherStatusEnum | str | None) -> str:
    """Badge shown on dashboards: only approved teachers read as active."""
    if status == TeacherStatusEnum.APPROVED:
        return "active"
    return "inactive"


class TeachersService:
    """Teachers domain service."""

    def __init__(self, repository: TeachersRepository) -> None:
        self.repository = repository

    async def create_teacher(self, **values: Any) -> Teacher:
        values.setdefault("status", TeacherStatusEnum.PENDING)
        values.setdefault("available", True)
        return await self.repository.create_teacher(**values)

    async def get_teacher(self, teacher_id: UUID) -> Teacher:
        teacher = await self.repository.get_teacher_by_id(teacher_id)
        if teacher is None:
            raise NotFoundException("Teacher not found")
        return teacher

    async def find_profile(self, *, user_id: UUID | None, email: str | None) -> Teacher:
        """Look a profile up by user id first, then by email."""
        if user_id is None and not email:
            raise ValidationException("User ID or email is required")

        if user_id is not None:
            teacher = await self.repository.get_teacher_by_id(user_id)
        else:
            teacher = await self.repository.get_teacher_by_email(email)
        if teacher is None:
            logger.info("Teacher not found: user_id=%s email=%s", user_id, email)
            raise NotFoundException("Teacher not found")
        return teacher

    async def list_public(self, *, language: str | None, limit: int, offset: int) -> tuple[list[Teacher], int]:
        """Approved teachers currently taking students."""
        return await self.repository.list_teachers(
            statuses=PUBLIC_STATUSES,
            available_only=True,
            language=language,
            limit=limit,
            offset=offset,
        )

    async def list_pending(self, *, limit: int, offset: int) -> tuple[list[Teacher], int]:
        return await self.repository.list_teachers(
            statuses=(TeacherStatusEnum.PENDING,),
            available_only=False,
            language=None,
            limit=limit,
            offset=offset,
        )

    async def update_profile(self, payload: TeacherUpdate, actor) -> Teacher:
        teacher = await self.get_teacher(payload.id)
        ensure_self_or_admin(actor, teacher.id)

        changes = payload.model_dump(exclude_unset=True, exclude={"id"})
        if not is_admin(actor) and ADMIN_ONLY_FIELDS & changes.keys():
            raise UnauthorizedException("Only admin can change teacher status")

        changes["updated_at"] = utc_now()
        return await self.repository.update_teacher(teacher, **changes)

    async def set_status(self, teacher_id: UUID, status: TeacherStatusEnum) -> Teacher:
        teacher = await self.get_teacher(teacher_id)
        previous = teacher.status
        teacher = await self.repository.update_teacher(teacher, status=status, updated_at=utc_now())
        logger.info("Teacher %s status %s -> %s", teacher_id, previous, status)
        return teacher

    async def set_avatar(self, teacher_id: UUID, avatar: str | None) -> Teacher | None:
        teacher = await self.repository.get_teacher_by_id(teacher_id)
        if teacher is None:
            return None
        return await self.repository.update_teacher(teacher, avatar=avatar, updated_at=utc_now())

    async def count_by_status(self) -> dict[TeacherStatusEnum, int]:
        return await self.repository.count_by_status()


async def get_teachers_service(session: AsyncSession = Depends(get_db_session)) -> TeachersService:
    """Dependency provider for teachers service."""
    return TeachersService(TeachersRepository(session))
