"""Students repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.modules.students.models import Student


class StudentsRepository:
    """DB operations for students domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_student(self, **values: Any) -> Student:
        student = Student(**values)
        self.session.add(student)
        await self.session.flush()
        return student

    async def get_student_by_id(self, student_id: UUID) -> Student | None:
        return await self.session.get(Student, student_id)

    async def get_student_by_email(self, email: str) -> Student | None:
        stmt = select(Student).where(Student.email == email.lower())
        return await self.session.scalar(stmt)

    async def count_students(self) -> int:
        return int((await self.session.scalar(select(func.count()).select_from(Student))) or 0)

    async def update_student(self, student: Student, **changes: Any) -> Student:
        for key, value in changes.items():
            setattr(student, key, value)
        await self.session.flush()
        return student
