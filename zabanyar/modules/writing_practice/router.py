"""Writing practice API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from zabanyar.core.enums import RoleEnum
from zabanyar.modules.identity.service import get_current_user, require_roles
from zabanyar.modules.writing_practice.schemas import (
    AutoCorrectRequest,
    CorrectionRead,
    ExerciseCreate,
    ExerciseList,
    ExerciseRead,
    SubmissionCreate,
    SubmissionDeleted,
    SubmissionList,
    SubmissionRead,
    SubmitResult,
    WritingStatisticsRead,
)
from zabanyar.modules.writing_practice.service import (
    WritingPracticeService,
    get_writing_practice_service,
    to_correction_read,
)
from zabanyar.shared.pagination import get_limit_param

router = APIRouter(prefix="/writing-practice", tags=["writing-practice"])


@router.get("/exercises", response_model=ExerciseList)
async def list_exercises(
    difficulty: str | None = Query(default=None, max_length=32),
    topic: str | None = Query(default=None, max_length=64),
    limit: int = Depends(get_limit_param),
    service: WritingPracticeService = Depends(get_writing_practice_service),
) -> ExerciseList:
    """List active exercises, newest first."""
    items = await service.list_exercises(difficulty=difficulty, topic=topic, limit=limit)
    return ExerciseList(exercises=[ExerciseRead.model_validate(item) for item in items], total=len(items))


@router.post("/exercises", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
async def create_exercise(
    payload: ExerciseCreate,
    service: WritingPracticeService = Depends(get_writing_practice_service),
    _admin=Depends(require_roles(RoleEnum.ADMIN)),
) -> ExerciseRead:
    exercise = await service.create_exercise(payload)
    return ExerciseRead.model_validate(exercise)


@router.post("/submit", response_model=SubmitResult)
async def submit(
    payload: SubmissionCreate,
    service: WritingPracticeService = Depends(get_writing_practice_service),
    current_user=Depends(get_current_user),
) -> SubmitResult:
    """Save the text and grade it; grading problems leave ``correction`` empty."""
    submission, correction = await service.submit(payload, current_user)
    return SubmitResult(
        submission_id=submission.id,
        correction=to_correction_read(correction) if correction is not None else None,
    )


@router.post("/auto-correct", response_model=CorrectionRead)
async def auto_correct(
    payload: AutoCorrectRequest,
    service: WritingPracticeService = Depends(get_writing_practice_service),
    current_user=Depends(get_current_user),
) -> CorrectionRead:
    correction = await service.auto_correct(payload, current_user)
    return to_correction_read(correction)


@router.get("/submissions", response_model=SubmissionList)
async def list_submissions(
    student_id: UUID | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=100),
    service: WritingPracticeService = Depends(get_writing_practice_service),
    current_user=Depends(get_current_user),
) -> SubmissionList:
    items = await service.list_submissions(student_id, limit, current_user)
    return SubmissionList(submissions=[SubmissionRead.model_validate(item) for item in items], total=len(items))


@router.delete("/submissions/{submission_id}", response_model=SubmissionDeleted)
async def delete_submission(
    submission_id: UUID,
    service: WritingPracticeService = Depends(get_writing_practice_service),
    current_user=Depends(get_current_user),
) -> SubmissionDeleted:
    submission = await service.delete_submission(submission_id, current_user)
    return SubmissionDeleted(submission_id=submission_id, exercise_id=submission.exercise_id)


@router.get("/statistics", response_model=WritingStatisticsRead)
async def get_statistics(
    student_id: UUID | None = Query(default=None),
    service: WritingPracticeService = Depends(get_writing_practice_service),
    current_user=Depends(get_current_user),
) -> WritingStatisticsRead:
    """Writing totals, created empty on first read."""
    return await service.statistics(student_id, current_user)
