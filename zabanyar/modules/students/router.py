"""Student profile API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zabanyar.modules.identity.service import get_current_user
from zabanyar.modules.students.schemas import StudentProfileResponse, StudentRead, StudentUpdate
from zabanyar.modules.students.service import StudentsService, get_students_service

router = APIRouter(prefix="/student-profile", tags=["students"])


@router.get("", response_model=StudentProfileResponse)
async def get_student_profile(
    user_id: UUID | None = Query(default=None),
    email: str | None = Query(default=None),
    service: StudentsService = Depends(get_students_service),
    current_user=Depends(get_current_user),
) -> StudentProfileResponse:
    """Fetch a student profile by user id or email."""
    student = await service.find_profile(user_id=user_id, email=email)
    return StudentProfileResponse(student=StudentRead.model_validate(student))


@router.put("", response_model=StudentProfileResponse)
async def update_student_profile(
    payload: StudentUpdate,
    service: StudentsService = Depends(get_students_service),
    current_user=Depends(get_current_user),
) -> StudentProfileResponse:
    student = await service.update_profile(payload, current_user)
    return StudentProfileResponse(
        student=StudentRead.model_validate(student),
        message="Profile updated successfully",
    )
