"""Admin API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zabanyar.core.enums import TeacherStatusEnum
from zabanyar.modules.admin.schemas import AdminActionRead, PlatformStats, TeacherReview, TeacherReviewResult
from zabanyar.modules.admin.service import AdminService, get_admin_service
from zabanyar.modules.identity.service import get_current_user
from zabanyar.modules.teachers.schemas import TeacherRead
from zabanyar.shared.pagination import Page, build_page, get_pagination_params

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/teachers/pending", response_model=Page[TeacherRead])
async def list_pending_teachers(
    pagination=Depends(get_pagination_params),
    service: AdminService = Depends(get_admin_service),
    current_user=Depends(get_current_user),
) -> Page[TeacherRead]:
    """Teachers waiting for review."""
    items, total = await service.list_pending_teachers(current_user, pagination.limit, pagination.offset)
    return build_page([TeacherRead.model_validate(item) for item in items], total, pagination)


async def _review(
    teacher_id: UUID,
    status: TeacherStatusEnum,
    payload: TeacherReview | None,
    service: AdminService,
    current_user,
) -> TeacherReviewResult:
    teacher, action = await service.review_teacher(
        teacher_id,
        status,
        current_user,
        reason=payload.reason if payload is not None else None,
    )
    return TeacherReviewResult(
        teacher=TeacherRead.model_validate(teacher),
        action=AdminActionRead.model_validate(action),
    )


@router.post("/teachers/{teacher_id}/approve", response_model=TeacherReviewResult)
async def approve_teacher(
    teacher_id: UUID,
    payload: TeacherReview | None = None,
    service: AdminService = Depends(get_admin_service),
    current_user=Depends(get_current_user),
) -> TeacherReviewResult:
    return await _review(teacher_id, TeacherStatusEnum.APPROVED, payload, service, current_user)


@router.post("/teachers/{teacher_id}/reject", response_model=TeacherReviewResult)
async def reject_teacher(
    teacher_id: UUID,
    payload: TeacherReview | None = None,
    service: AdminService = Depends(get_admin_service),
    current_user=Depends(get_current_user),
) -> TeacherReviewResult:
    return await _review(teacher_id, TeacherStatusEnum.REJECTED, payload, service, current_user)


@router.get("/stats", response_model=PlatformStats)
async def get_platform_stats(
    service: AdminService = Depends(get_admin_service),
    current_user=Depends(get_current_user),
) -> PlatformStats:
    return await service.platform_stats(current_user)


@router.get("/actions", response_model=Page[AdminActionRead])
async def list_admin_actions(
    teacher_id: UUID | None = Query(default=None),
    pagination=Depends(get_pagination_params),
    service: AdminService = Depends(get_admin_service),
    current_user=Depends(get_current_user),
) -> Page[AdminActionRead]:
    """Admin decisions, newest first; `teacher_id` narrows to one teacher's reviews."""
    items, total = await service.list_actions(
        current_user,
        teacher_id=teacher_id,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return build_page([AdminActionRead.model_validate(item) for item in items], total, pagination)
