"""Classes repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.enums import ClassStatusEnum
from zabanyar.modules.classes.models import ClassSession


class ClassesRepository:
    """DB operations for class sessions."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_class(self, **values: Any) -> ClassSession:
        item = ClassSession(**values)
        self.session.add(item)
        await self.session.flush()
        return item

    async def get_class_by_id(self, class_id: UUID) -> ClassSession | None:
        return await self.session.get(ClassSession, class_id)

    async def list_classes(self, *, teacher_id: UUID | None = None, student_id: UUID | None = None) -> list[ClassSession]:
        stmt = select(ClassSession)
        if teacher_id is not None:
            stmt = stmt.where(ClassSession.teacher_id == teacher_id)
        if student_id is not None:
            stmt = stmt.where(ClassSession.student_id == student_id)
        stmt = stmt.order_by(ClassSession.class_date.desc(), ClassSession.class_time.desc())
        return list((await self.session.scalars(stmt)).all())

    async def set_status(self, item: ClassSession, status: ClassStatusEnum) -> ClassSession:
        item.status = status
        await self.session.flush()
        return item
