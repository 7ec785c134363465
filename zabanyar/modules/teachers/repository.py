"""Teachers repository layer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.enums import TeacherStatusEnum
from zabanyar.modules.teachers.models import Teacher


class TeachersRepository:
    """DB operations for teachers domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_teacher(self, **values: Any) -> Teacher:
        teacher = Teacher(**values)
        self.session.add(teacher)
        await self.session.flush()
        return teacher

    async def get_teacher_by_id(self, teacher_id: UUID) -> Teacher | None:
        return await self.session.get(Teacher, teacher_id)

    async def get_teacher_by_email(self, email: str) -> Teacher | None:
        stmt = select(Teacher).where(Teacher.email == email.lower())
        return await self.session.scalar(stmt)

    async def list_teachers(
        self,
        *,
        statuses: Iterable[TeacherStatusEnum] | None,
        available_only: bool,
        language: str | None,
        limit: int,
        offset: int,
    ) -> tuple[list[Teacher], int]:
        base_stmt: Select[tuple[Teacher]] = select(Teacher)
        if statuses is not None:
            base_stmt = base_stmt.where(Teacher.status.in_(list(statuses)))
        if available_only:
            base_stmt = base_stmt.where(Teacher.available.is_(True))

        if language:
            # JSON containment differs per dialect; filter the list in Python.
            rows = (await self.session.scalars(base_stmt.order_by(Teacher.created_at.desc()))).all()
            matched = [row for row in rows if language in (row.languages or [])]
            return matched[offset : offset + limit], len(matched)

        count_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = int((await self.session.scalar(count_stmt)) or 0)
        stmt = base_stmt.order_by(Teacher.created_at.desc()).limit(limit).offset(offset)
        items = (await self.session.scalars(stmt)).all()
        return list(items), total

    async def count_by_status(self) -> dict[TeacherStatusEnum, int]:
        stmt = select(Teacher.status, func.count()).group_by(Teacher.status)
        rows = (await self.session.execute(stmt)).all()
        return {status: int(count) for status, count in rows}

    async def update_teacher(self, teacher: Teacher, **changes: Any) -> Teacher:
        for key, value in changes.items():
            setattr(teacher, key, value)
        await self.session.flush()
        return teacher
