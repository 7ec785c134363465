"""Scheduling API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from zabanyar.modules.identity.service import get_current_user
from zabanyar.modules.scheduling.schemas import (
    ScheduleConsistency,
    ScheduleGrid,
    SchedulePresetRequest,
    ScheduleReplaceRequest,
)
from zabanyar.modules.scheduling.service import SchedulingService, get_scheduling_service

router = APIRouter(prefix="/teachers/{teacher_id}/schedule", tags=["scheduling"])


@router.get("", response_model=ScheduleGrid)
async def get_schedule(
    teacher_id: UUID,
    service: SchedulingService = Depends(get_scheduling_service),
) -> ScheduleGrid:
    """Return the full weekly grid with stored availability applied."""
    return await service.get_grid(teacher_id)


@router.put("", response_model=ScheduleGrid)
async def replace_schedule(
    teacher_id: UUID,
    payload: ScheduleReplaceRequest,
    service: SchedulingService = Depends(get_scheduling_service),
    current_user=Depends(get_current_user),
) -> ScheduleGrid:
    return await service.replace_schedule(teacher_id, payload.slots, current_user)


@router.post("/preset", response_model=ScheduleGrid)
async def apply_preset(
    teacher_id: UUID,
    payload: SchedulePresetRequest,
    service: SchedulingService = Depends(get_scheduling_service),
    current_user=Depends(get_current_user),
) -> ScheduleGrid:
    return await service.apply_preset(teacher_id, payload.preset, current_user)


@router.get("/consistency", response_model=ScheduleConsistency)
async def get_consistency(
    teacher_id: UUID,
    service: SchedulingService = Depends(get_scheduling_service),
) -> ScheduleConsistency:
    """Report days that differ between the schedule and the teacher profile."""
    return await service.consistency(teacher_id)
