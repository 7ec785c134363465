"""Dashboard API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from zabanyar.modules.dashboard.schemas import StudentDashboard, TeacherDashboard
from zabanyar.modules.dashboard.service import DashboardService, get_dashboard_service
from zabanyar.modules.identity.service import get_current_user

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/teacher/{teacher_id}", response_model=TeacherDashboard)
async def get_teacher_dashboard(
    teacher_id: UUID,
    service: DashboardService = Depends(get_dashboard_service),
    current_user=Depends(get_current_user),
) -> TeacherDashboard:
    """Booking analytics, earnings and notifications for a teacher."""
    return await service.teacher_dashboard(teacher_id, current_user)


@router.get("/student/{student_id}", response_model=StudentDashboard)
async def get_student_dashboard(
    student_id: UUID,
    service: DashboardService = Depends(get_dashboard_service),
    current_user=Depends(get_current_user),
) -> StudentDashboard:
    return await service.student_dashboard(student_id, current_user)
