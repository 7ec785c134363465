"""Writing practice business logic layer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict
from typing import Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.config import get_settings
from zabanyar.core.database import get_db_session
from zabanyar.core.metrics import record_side_effect_failure
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.students.repository import StudentsRepository
from zabanyar.modules.writing_practice import autocorrect
from zabanyar.modules.writing_practice.models import (
    DEFAULT_EVALUATION_CRITERIA,
    WritingExercise,
    WritingSubmission,
)
from zabanyar.modules.writing_practice.repository import WritingPracticeRepository
from zabanyar.modules.writing_practice.schemas import (
    AutoCorrectRequest,
    CorrectionRead,
    ExerciseCreate,
    GrammarErrorRead,
    ImprovementRead,
    RecentSubmission,
    ScoresRead,
    SubmissionCreate,
    WritingStatisticsRead,
)
from zabanyar.shared.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)

TREND_WINDOW = 5


def improvement_rate(scores: Sequence[int | None]) -> float:
    """Mean of the newest window of scores minus the mean of the one before it.

    ``scores`` is ordered newest first; missing scores count as zero.
    """
    if len(scores) < 2:
        return 0.0
    recent = [score or 0 for score in scores[:TREND_WINDOW]]
    older = [score or 0 for score in scores[TREND_WINDOW : TREND_WINDOW * 2]]
    if not older:
        return 0.0
    return sum(recent) / len(recent) - sum(older) / len(older)


def _require_student_id(student_id: UUID | None) -> None:
    if student_id is None:
        raise ValidationException("Student ID is required")


def graded_values(correction: autocorrect.Correction) -> dict[str, Any]:
    """Submission columns filled in by the grader."""
    return {
        "word_count": correction.word_count,
        "character_count": correction.character_count,
        "auto_correction_data": correction.analysis.as_dict(),
        "improvement_suggestions": [asdict(item) for item in correction.improvements],
        "overall_score": correction.scores.overall,
        "grammar_score": correction.scores.grammar,
        "vocabulary_score": correction.scores.vocabulary,
        "coherence_score": correction.scores.coherence,
        "creativity_score": correction.scores.creativity,
        "feedback": correction.feedback,
        "is_graded": True,
    }


def to_correction_read(correction: autocorrect.Correction) -> CorrectionRead:
    return CorrectionRead(
        word_count=correction.word_count,
        character_count=correction.character_count,
        scores=ScoresRead.model_validate(correction.scores),
        grammar_errors=[GrammarErrorRead.model_validate(item) for item in correction.analysis.grammar_errors],
        improvements=[ImprovementRead.model_validate(item) for item in correction.improvements],
        feedback=correction.feedback,
    )


class WritingPracticeService:
    """Exercises, graded submissions and per-student statistics."""

    def __init__(self, repository: WritingPracticeRepository, students_repository: StudentsRepository) -> None:
        self.repository = repository
        self.students_repository = students_repository

    async def list_exercises(self, *, difficulty: str | None, topic: str | None, limit: int) -> list[WritingExercise]:
        return await self.repository.list_exercises(difficulty=difficulty, topic=topic, limit=limit)

    async def create_exercise(self, payload: ExerciseCreate) -> WritingExercise:
        if not payload.title or not payload.prompt or not payload.difficulty_level:
            raise ValidationException("Missing required fields")

        exercise = await self.repository.create_exercise(
            title=payload.title,
            description=payload.description,
            prompt=payload.prompt,
            topic_category=payload.topic_category,
            difficulty_level=payload.difficulty_level,
            word_limit_min=payload.word_limit_min or 50,
            word_limit_max=payload.word_limit_max or 500,
            estimated_time=payload.estimated_time or 15,
            evaluation_criteria=payload.evaluation_criteria or dict(DEFAULT_EVALUATION_CRITERIA),
            tips=payload.tips or [],
        )
        logger.info("Writing exercise %s created", exercise.id)
        return exercise

    async def _get_exercise(self, exercise_id: UUID) -> WritingExercise:
        exercise = await self.repository.get_exercise(exercise_id)
        if exercise is None:
            raise NotFoundException("Exercise not found")
        return exercise

    async def _get_submission(self, submission_id: UUID) -> WritingSubmission:
        submission = await self.repository.get_submission(submission_id)
        if submission is None:
            raise NotFoundException("Submission not found")
        return submission

    async def submit(
        self,
        payload: SubmissionCreate,
        actor,
    ) -> tuple[WritingSubmission, autocorrect.Correction | None]:
        """Store the latest text for the exercise, then grade it if possible."""
        present = {
            "student_id": payload.student_id is not None,
            "exercise_id": payload.exercise_id is not None,
            "content": bool(payload.content),
        }
        if not all(present.values()):
            raise ValidationException("Missing required fields", details=present)

        ensure_self_or_admin(actor, payload.student_id)
        await self._get_exercise(payload.exercise_id)
        if await self.students_repository.get_student_by_id(payload.student_id) is None:
            raise NotFoundException("Student not found")

        content = payload.content
        counts = {
            "content": content,
            "word_count": autocorrect.count_words(content),
            "character_count": len(content),
        }
        submission = await self.repository.get_latest_submission(payload.student_id, payload.exercise_id)
        if submission is not None:
            submission = await self.repository.update_submission(submission, **counts)
        else:
            submission = await self.repository.create_submission(
                student_id=payload.student_id,
                exercise_id=payload.exercise_id,
                **counts,
            )

        correction = await self._grade_best_effort(submission)
        await self.refresh_statistics(payload.student_id)
        return submission, correction

    async def _grade_best_effort(self, submission: WritingSubmission) -> autocorrect.Correction | None:
        submission_id = submission.id
        try:
            async with self.repository.savepoint():
                correction = autocorrect.correct(submission.content)
                await self.repository.update_submission(submission, **graded_values(correction))
        except Exception:
            logger.exception("Auto-correct of submission %s failed", submission_id)
            record_side_effect_failure("writing_auto_correct")
            return None
        return correction

    async def auto_correct(self, payload: AutoCorrectRequest, actor) -> autocorrect.Correction:
        """Grade ``content``; when a submission is named, store the grading on it."""
        if not payload.content or payload.exercise_id is None:
            raise ValidationException("Content and exercise ID are required")

        correction = autocorrect.correct(payload.content)
        if payload.submission_id is not None:
            submission = await self._get_submission(payload.submission_id)
            ensure_self_or_admin(actor, submission.student_id)
            await self.repository.update_submission(
                submission,
                content=payload.content,
                **graded_values(correction),
            )
            await self.refresh_statistics(submission.student_id)
        return correction

    async def list_submissions(self, student_id: UUID | None, limit: int | None, actor) -> list[WritingSubmission]:
        _require_student_id(student_id)
        ensure_self_or_admin(actor, student_id)
        return await self.repository.list_submissions(student_id, limit=limit or get_settings().writing_page_size)

    async def delete_submission(self, submission_id: UUID, actor) -> WritingSubmission:
        submission = await self._get_submission(submission_id)
        ensure_self_or_admin(actor, submission.student_id)
        await self.repository.delete_submission(submission)
        logger.info("Writing submission %s deleted", submission_id)
        await self.refresh_statistics(submission.student_id)
        return submission

    async def refresh_statistics(self, student_id: UUID) -> None:
        statistics = await self.repository.get_statistics(student_id)
        if statistics is None:
            statistics = await self.repository.create_statistics(student_id)

        submissions = await self.repository.list_submissions(student_id)
        scores = [item.overall_score for item in submissions if item.overall_score is not None]
        await self.repository.save_statistics(
            statistics,
            total_submissions=len(submissions),
            total_words_written=sum(item.word_count for item in submissions),
            average_score=round(sum(scores) / len(scores), 2) if scores else 0.0,
        )

    async def statistics(self, student_id: UUID | None, actor) -> WritingStatisticsRead:
        _require_student_id(student_id)
        ensure_self_or_admin(actor, student_id)
        statistics = await self.repository.get_statistics(student_id)
        if statistics is None:
            statistics = await self.repository.create_statistics(student_id)
            recent: list[WritingSubmission] = []
        else:
            recent = await self.repository.list_submissions(student_id, limit=TREND_WINDOW * 2)

        return WritingStatisticsRead(
            student_id=student_id,
            total_submissions=statistics.total_submissions,
            total_words_written=statistics.total_words_written,
            average_score=statistics.average_score,
            improvement_rate=improvement_rate([item.overall_score for item in recent]),
            recent_submissions=[RecentSubmission.model_validate(item) for item in recent],
        )


async def get_writing_practice_service(session: AsyncSession = Depends(get_db_session)) -> WritingPracticeService:
    """Dependency provider for writing practice service."""
    return WritingPracticeService(WritingPracticeRepository(session), StudentsRepository(session))
