"""Writing practice repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.modules.writing_practice.models import WritingExercise, WritingStatistics, WritingSubmission


class WritingPracticeRepository:
    """DB operations for exercises, submissions and statistics."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def savepoint(self):
        return self.session.begin_nested()

    async def list_exercises(
        self,
        *,
        difficulty: str | None,
        topic: str | None,
        limit: int,
    ) -> list[WritingExercise]:
        stmt = select(WritingExercise).where(WritingExercise.is_active.is_(True))
        if difficulty:
            stmt = stmt.where(WritingExercise.difficulty_level == difficulty)
        if topic:
            stmt = stmt.where(WritingExercise.topic_category == topic)
        stmt = stmt.order_by(WritingExercise.created_at.desc()).limit(limit)
        return list((await self.session.scalars(stmt)).all())

    async def create_exercise(self, **values: Any) -> WritingExercise:
        exercise = WritingExercise(**values)
        self.session.add(exercise)
        await self.session.flush()
        return exercise

    async def get_exercise(self, exercise_id: UUID) -> WritingExercise | None:
        return await self.session.get(WritingExercise, exercise_id)

    async def get_submission(self, submission_id: UUID) -> WritingSubmission | None:
        return await self.session.get(WritingSubmission, submission_id)

    async def get_latest_submission(self, student_id: UUID, exercise_id: UUID) -> WritingSubmission | None:
        stmt = (
            select(WritingSubmission)
            .where(
                WritingSubmission.student_id == student_id,
                WritingSubmission.exercise_id == exercise_id,
            )
            .order_by(WritingSubmission.submitted_at.desc())
            .limit(1)
        )
        return await self.session.scalar(stmt)

    async def create_submission(self, **values: Any) -> WritingSubmission:
        submission = WritingSubmission(**values)
        self.session.add(submission)
        await self.session.flush()
        return submission

    async def update_submission(self, submission: WritingSubmission, **changes: Any) -> WritingSubmission:
        for key, value in changes.items():
            setattr(submission, key, value)
        await self.session.flush()
        return submission

    async def delete_submission(self, submission: WritingSubmission) -> None:
        await self.session.delete(submission)
        await self.session.flush()

    async def list_submissions(self, student_id: UUID, *, limit: int | None = None) -> list[WritingSubmission]:
        stmt = (
            select(WritingSubmission)
            .where(WritingSubmission.student_id == student_id)
            .order_by(WritingSubmission.submitted_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list((await self.session.scalars(stmt)).all())

    async def get_statistics(self, student_id: UUID) -> WritingStatistics | None:
        stmt = select(WritingStatistics).where(WritingStatistics.student_id == student_id)
        return await self.session.scalar(stmt)

    async def create_statistics(self, student_id: UUID) -> WritingStatistics:
        statistics = WritingStatistics(
            student_id=student_id,
            total_submissions=0,
            total_words_written=0,
            average_score=0.0,
        )
        self.session.add(statistics)
        await self.session.flush()
        return statistics

    async def save_statistics(self, statistics: WritingStatistics, **values: Any) -> WritingStatistics:
        for key, value in values.items():
            setattr(statistics, key, value)
        await self.session.flush()
        return statistics
