"""Admin schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from zabanyar.modules.teachers.schemas import TeacherRead


class AdminActionRead(BaseModel):
    """Admin action response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    admin_id: UUID
    action: str
    target_type: str
    target_id: str | None
    payload: dict
    created_at: datetime


class TeacherReview(BaseModel):
    reason: str | None = Field(default=None, max_length=1000)


class TeacherReviewResult(BaseModel):
    teacher: TeacherRead
    action: AdminActionRead


class PlatformStats(BaseModel):
    """Platform-wide counters for the admin overview."""

    generated_at: datetime
    teachers_total: int
    teachers_by_status: dict[str, int]
    students_total: int
    bookings_total: int
    bookings_by_status: dict[str, int]
    booking_revenue: Decimal
