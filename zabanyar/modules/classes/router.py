"""Classes API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from zabanyar.modules.classes.schemas import ClassCreate, ClassRead, EarningsStats, VideoCallEnded, VideoRoom
from zabanyar.modules.classes.service import ClassesService, get_classes_service
from zabanyar.modules.classes.stats import Period
from zabanyar.modules.identity.service import get_current_user

router = APIRouter(prefix="/classes", tags=["classes"])


@router.post("", response_model=ClassRead, status_code=status.HTTP_201_CREATED)
async def create_class(
    payload: ClassCreate,
    service: ClassesService = Depends(get_classes_service),
    current_user=Depends(get_current_user),
) -> ClassRead:
    return ClassRead.model_validate(await service.create_class(payload, current_user))


@router.get("/teacher/{teacher_id}", response_model=list[ClassRead])
async def list_teacher_classes(
    teacher_id: UUID,
    period: Period = Query(default="all"),
    service: ClassesService = Depends(get_classes_service),
    current_user=Depends(get_current_user),
) -> list[ClassRead]:
    items = await service.list_for_teacher(teacher_id, period, current_user)
    return [ClassRead.model_validate(item) for item in items]


@router.get("/student/{student_id}", response_model=list[ClassRead])
async def list_student_classes(
    student_id: UUID,
    service: ClassesService = Depends(get_classes_service),
    current_user=Depends(get_current_user),
) -> list[ClassRead]:
    items = await service.list_for_student(student_id, current_user)
    return [ClassRead.model_validate(item) for item in items]


@router.get("/teacher/{teacher_id}/earnings", response_model=EarningsStats)
async def get_earnings(
    teacher_id: UUID,
    period: Period = Query(default="all"),
    service: ClassesService = Depends(get_classes_service),
    current_user=Depends(get_current_user),
) -> EarningsStats:
    """Earnings statistics computed from the teacher's classes."""
    return await service.earnings(teacher_id, period, current_user)


@router.post("/{class_id}/video-call/start", response_model=VideoRoom)
async def start_video_call(
    class_id: UUID,
    service: ClassesService = Depends(get_classes_service),
    current_user=Depends(get_current_user),
) -> VideoRoom:
    return await service.start_call(class_id, current_user)


@router.post("/{class_id}/video-call/end", response_model=VideoCallEnded)
async def end_video_call(
    class_id: UUID,
    service: ClassesService = Depends(get_classes_service),
    current_user=Depends(get_current_user),
) -> VideoCallEnded:
    return await service.end_call(class_id, current_user)
