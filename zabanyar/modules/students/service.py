"""Students business logic layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import StudentStatusEnum
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.students.models import (
    DEFAULT_NOTIFICATION_PREFERENCES,
    DEFAULT_PRIVACY_SETTINGS,
    Student,
)
from zabanyar.modules.students.repository import StudentsRepository
from zabanyar.modules.students.schemas import StudentUpdate
from zabanyar.shared.exceptions import NotFoundException, ValidationException
from zabanyar.shared.utils import utc_now

_PREFERENCE_DEFAULTS = {
    "notification_preferences": DEFAULT_NOTIFICATION_PREFERENCES,
    "privacy_settings": DEFAULT_PRIVACY_SETTINGS,
}


class StudentsService:
    """Students domain service."""

    def __init__(self, repository: StudentsRepository) -> None:
        self.repository = repository

    async def create_student(self, **values: Any) -> Student:
        values.setdefault("status", StudentStatusEnum.ACTIVE)
        values.setdefault("notification_preferences", dict(DEFAULT_NOTIFICATION_PREFERENCES))
        values.setdefault("privacy_settings", dict(DEFAULT_PRIVACY_SETTINGS))
        return await self.repository.create_student(**values)

    async def get_student(self, student_id: UUID) -> Student:
        student = await self.repository.get_student_by_id(student_id)
        if student is None:
            raise NotFoundException("Student not found")
        return student

    async def find_profile(self, *, user_id: UUID | None, email: str | None) -> Student:
        if user_id is None and not email:
            raise ValidationException("User ID or email is required")
        if user_id is not None:
            student = await self.repository.get_student_by_id(user_id)
        else:
            student = await self.repository.get_student_by_email(email)
        if student is None:
            raise NotFoundException("Student not found")
        return student

    async def update_profile(self, payload: StudentUpdate, actor) -> Student:
        """Write the given fields; preference objects are merged key by key."""
        student = await self.get_student(payload.id)
        ensure_self_or_admin(actor, student.id)

        changes = payload.model_dump(exclude_unset=True, exclude={"id"})
        for name, defaults in _PREFERENCE_DEFAULTS.items():
            if changes.get(name) is not None:
                current = getattr(student, name) or {}
                changes[name] = {**defaults, **current, **changes[name]}
        changes["updated_at"] = utc_now()
        return await self.repository.update_student(student, **changes)

    async def set_avatar(self, student_id: UUID, avatar: str | None) -> Student | None:
        student = await self.repository.get_student_by_id(student_id)
        if student is None:
            return None
        return await self.repository.update_student(student, avatar=avatar, updated_at=utc_now())

    async def count_students(self) -> int:
        return await self.repository.count_students()


async def get_students_service(session: AsyncSession = Depends(get_db_session)) -> StudentsService:
    """Dependency provider for students service."""
    return StudentsService(StudentsRepository(session))
