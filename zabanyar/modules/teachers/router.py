"""Teachers API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zabanyar.modules.identity.service import get_current_user
from zabanyar.modules.teachers.schemas import TeacherCard, TeacherProfileResponse, TeacherRead, TeacherUpdate
from zabanyar.modules.teachers.service import TeachersService, display_status, get_teachers_service
from zabanyar.shared.pagination import Page, build_page, get_pagination_params

router = APIRouter(tags=["teachers"])


@router.get("/teachers", response_model=Page[TeacherCard])
async def list_teachers(
    language: str | None = Query(default=None, max_length=64),
    pagination=Depends(get_pagination_params),
    service: TeachersService = Depends(get_teachers_service),
) -> Page[TeacherCard]:
    """Browse approved teachers that accept bookings."""
    items, total = await service.list_public(
        language=language,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return build_page([TeacherCard.model_validate(item) for item in items], total, pagination)


@router.get("/teachers/{teacher_id}", response_model=TeacherCard)
async def get_teacher(
    teacher_id: UUID,
    service: TeachersService = Depends(get_teachers_service),
) -> TeacherCard:
    return TeacherCard.model_validate(await service.get_teacher(teacher_id))


@router.get("/teacher-profile", response_model=TeacherProfileResponse)
async def get_teacher_profile(
    user_id: UUID | None = Query(default=None),
    email: str | None = Query(default=None),
    service: TeachersService = Depends(get_teachers_service),
    current_user=Depends(get_current_user),
) -> TeacherProfileResponse:
    """Fetch a teacher profile by user id or email."""
    teacher = await service.find_profile(user_id=user_id, email=email)
    return TeacherProfileResponse(
        teacher=TeacherRead.model_validate(teacher),
        display_status=display_status(teacher.status),
    )


@router.put("/teacher-profile", response_model=TeacherProfileResponse)
async def update_teacher_profile(
    payload: TeacherUpdate,
    service: TeachersService = Depends(get_teachers_service),
    current_user=Depends(get_current_user),
) -> TeacherProfileResponse:
    """Update the given profile fields."""
    teacher = await service.update_profile(payload, current_user)
    return TeacherProfileResponse(
        teacher=TeacherRead.model_validate(teacher),
        display_status=display_status(teacher.status),
        message="Profile updated successfully",
    )
