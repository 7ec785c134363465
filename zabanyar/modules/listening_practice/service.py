"""Listening practice business logic layer."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.metrics import record_side_effect_failure
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.listening_practice.models import (
    DEFAULT_QUESTION_POINTS,
    ListeningExercise,
    ListeningSubmission,
)
from zabanyar.modules.listening_practice.repository import ListeningPracticeRepository
from zabanyar.modules.listening_practice.schemas import ExerciseCreate, SubmissionCreate
from zabanyar.modules.students.repository import StudentsRepository
from zabanyar.modules.writing_practice.autocorrect import round_half_up
from zabanyar.shared.exceptions import BusinessRuleException, NotFoundException, ValidationException

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnswerResult:
    question_id: UUID
    student_answer: str
    is_correct: bool
    points_earned: int


@dataclass(frozen=True, slots=True)
class Grade:
    answers: list[AnswerResult]
    correct_answers: int
    total_questions: int
    score: int


def _normalize(value: object) -> str:
    return str(value).strip().lower()


def grade_answers(questions: Sequence, answers: Mapping[UUID, str]) -> Grade:
    """Score answers against the questions' expected answers.

    Matching ignores case and surrounding whitespace. Questions without
    points are worth ten. The score is earned points as a whole percentage.
    """
    if not questions:
        raise BusinessRuleException("Exercise has no questions")

    results: list[AnswerResult] = []
    total_points = 0
    earned_points = 0
    for question in questions:
        points = question.points or DEFAULT_QUESTION_POINTS
        total_points += points
        given = answers.get(question.id) or ""
        is_correct = bool(given) and _normalize(given) == _normalize(question.correct_answer)
        if is_correct:
            earned_points += points
        results.append(AnswerResult(question.id, given, is_correct, points if is_correct else 0))

    return Grade(
        answers=results,
        correct_answers=sum(1 for item in results if item.is_correct),
        total_questions=len(questions),
        score=round_half_up(earned_points / total_points * 100),
    )


class ListeningPracticeService:
    """Exercises and scored listening submissions."""

    def __init__(self, repository: ListeningPracticeRepository, students_repository: StudentsRepository) -> None:
        self.repository = repository
        self.students_repository = students_repository

    async def list_exercises(
        self,
        *,
        difficulty: str | None,
        accent: str | None,
        limit: int,
    ) -> list[ListeningExercise]:
        return await self.repository.list_exercises(difficulty=difficulty, accent=accent, limit=limit)

    async def create_exercise(self, payload: ExerciseCreate) -> ListeningExercise:
        if not payload.title or not payload.audio_url or not payload.difficulty_level or not payload.questions:
            raise ValidationException("Missing required fields")

        exercise = await self.repository.create_exercise(
            title=payload.title,
            description=payload.description,
            audio_url=payload.audio_url,
            transcript=payload.transcript,
            difficulty_level=payload.difficulty_level,
            accent_type=payload.accent_type,
            duration_seconds=payload.duration_seconds,
            questions=[
                {
                    "question_text": item.question_text,
                    "question_type": item.question_type,
                    "options": item.options,
                    "correct_answer": item.correct_answer,
                    "points": item.points or DEFAULT_QUESTION_POINTS,
                    "order_index": index,
                }
                for index, item in enumerate(payload.questions)
            ],
        )
        logger.info("Listening exercise %s created with %s questions", exercise.id, len(payload.questions))
        return exercise

    async def submit(self, payload: SubmissionCreate, actor) -> tuple[ListeningSubmission, Grade]:
        """Score the answers and store the attempt; per-question rows are best effort."""
        present = {
            "student_id": payload.student_id is not None,
            "exercise_id": payload.exercise_id is not None,
            "answers": payload.answers is not None,
        }
        if not all(present.values()):
            raise ValidationException("Missing required fields", details=present)

        ensure_self_or_admin(actor, payload.student_id)
        if await self.repository.get_exercise(payload.exercise_id) is None:
            raise NotFoundException("Exercise not found")
        if await self.students_repository.get_student_by_id(payload.student_id) is None:
            raise NotFoundException("Student not found")

        questions = await self.repository.list_questions(payload.exercise_id)
        grade = grade_answers(questions, payload.answers)
        submission = await self.repository.create_submission(
            student_id=payload.student_id,
            exercise_id=payload.exercise_id,
            total_questions=grade.total_questions,
            correct_answers=grade.correct_answers,
            score=grade.score,
            time_taken=payload.time_taken,
            listening_attempts=payload.listening_attempts or 1,
            is_completed=True,
        )
        logger.info(
            "Listening submission %s scored %s for student %s",
            submission.id,
            grade.score,
            payload.student_id,
        )

        submission_id = submission.id
        try:
            async with self.repository.savepoint():
                await self.repository.add_answers(submission_id, [asdict(item) for item in grade.answers])
        except Exception:
            logger.exception("Saving answers of listening submission %s failed", submission_id)
            record_side_effect_failure("listening_answers")
        return submission, grade

    async def list_submissions(self, student_id: UUID | None, limit: int, actor) -> list[ListeningSubmission]:
        if student_id is None:
            raise ValidationException("Student ID is required")
        ensure_self_or_admin(actor, student_id)
        return await self.repository.list_submissions(student_id, limit=limit)


async def get_listening_practice_service(
    session: AsyncSession = Depends(get_db_session),
) -> ListeningPracticeService:
    """Dependency provider for listening practice service."""
    return ListeningPracticeService(ListeningPracticeRepository(session), StudentsRepository(session))
