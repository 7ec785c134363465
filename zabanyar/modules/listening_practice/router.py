"""Listening practice API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from zabanyar.core.enums import RoleEnum
from zabanyar.modules.identity.service import get_current_user, require_roles
from zabanyar.modules.listening_practice.schemas import (
    AnswerRead,
    ExerciseCreate,
    ExerciseList,
    ExerciseRead,
    SubmissionCreate,
    SubmissionList,
    SubmissionRead,
    SubmitResult,
)
from zabanyar.modules.listening_practice.service import ListeningPracticeService, get_listening_practice_service
from zabanyar.shared.pagination import get_limit_param

router = APIRouter(prefix="/listening-practice", tags=["listening-practice"])


@router.get("/exercises", response_model=ExerciseList)
async def list_exercises(
    difficulty: str | None = Query(default=None, max_length=32),
    accent: str | None = Query(default=None, max_length=32),
    limit: int = Depends(get_limit_param),
    service: ListeningPracticeService = Depends(get_listening_practice_service),
) -> ExerciseList:
    """List active exercises with their questions, newest first."""
    items = await service.list_exercises(difficulty=difficulty, accent=accent, limit=limit)
    return ExerciseList(exercises=[ExerciseRead.model_validate(item) for item in items], total=len(items))


@router.post("/exercises", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
async def create_exercise(
    payload: ExerciseCreate,
    service: ListeningPracticeService = Depends(get_listening_practice_service),
    _admin=Depends(require_roles(RoleEnum.ADMIN)),
) -> ExerciseRead:
    exercise = await service.create_exercise(payload)
    return ExerciseRead.model_validate(exercise)


@router.post("/submit", response_model=SubmitResult)
async def submit(
    payload: SubmissionCreate,
    service: ListeningPracticeService = Depends(get_listening_practice_service),
    current_user=Depends(get_current_user),
) -> SubmitResult:
    submission, grade = await service.submit(payload, current_user)
    return SubmitResult(
        submission_id=submission.id,
        score=grade.score,
        correct_answers=grade.correct_answers,
        total_questions=grade.total_questions,
        answers=[AnswerRead.model_validate(item) for item in grade.answers],
    )


@router.get("/submissions", response_model=SubmissionList)
async def list_submissions(
    student_id: UUID | None = Query(default=None),
    limit: int = Depends(get_limit_param),
    service: ListeningPracticeService = Depends(get_listening_practice_service),
    current_user=Depends(get_current_user),
) -> SubmissionList:
    items = await service.list_submissions(student_id, limit, current_user)
    return SubmissionList(submissions=[SubmissionRead.model_validate(item) for item in items], total=len(items))
