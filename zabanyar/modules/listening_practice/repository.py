"""Listening practice repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.modules.listening_practice.models import (
    ListeningAnswer,
    ListeningExercise,
    ListeningQuestion,
    ListeningSubmission,
)


class ListeningPracticeRepository:
    """DB operations for exercises, their questions and scored submissions."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def savepoint(self):
        return self.session.begin_nested()

    async def list_exercises(
        self,
        *,
        difficulty: str | None,
        accent: str | None,
        limit: int,
    ) -> list[ListeningExercise]:
        stmt = select(ListeningExercise).where(ListeningExercise.is_active.is_(True))
        if difficulty:
            stmt = stmt.where(ListeningExercise.difficulty_level == difficulty)
        if accent:
            stmt = stmt.where(ListeningExercise.accent_type == accent)
        stmt = stmt.order_by(ListeningExercise.created_at.desc()).limit(limit)
        return list((await self.session.scalars(stmt)).all())

    async def create_exercise(self, questions: list[dict[str, Any]], **values: Any) -> ListeningExercise:
        exercise = ListeningExercise(**values)
        exercise.questions = [ListeningQuestion(**item) for item in questions]
        self.session.add(exercise)
        await self.session.flush()
        return exercise

    async def get_exercise(self, exercise_id: UUID) -> ListeningExercise | None:
        return await self.session.get(ListeningExercise, exercise_id)

    async def list_questions(self, exercise_id: UUID) -> list[ListeningQuestion]:
        stmt = (
            select(ListeningQuestion)
            .where(ListeningQuestion.exercise_id == exercise_id)
            .order_by(ListeningQuestion.order_index.asc())
        )
        return list((await self.session.scalars(stmt)).all())

    async def create_submission(self, **values: Any) -> ListeningSubmission:
        submission = ListeningSubmission(**values)
        self.session.add(submission)
        await self.session.flush()
        return submission

    async def add_answers(self, submission_id: UUID, answers: list[dict[str, Any]]) -> None:
        self.session.add_all(ListeningAnswer(submission_id=submission_id, **item) for item in answers)
        await self.session.flush()

    async def list_submissions(self, student_id: UUID, *, limit: int) -> list[ListeningSubmission]:
        stmt = (
            select(ListeningSubmission)
            .where(ListeningSubmission.student_id == student_id)
            .order_by(ListeningSubmission.submitted_at.desc())
            .limit(limit)
        )
        return list((await self.session.scalars(stmt)).all())
