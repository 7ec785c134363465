"""Class session schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from zabanyar.core.enums import ClassStatusEnum, PaymentStatusEnum


class ClassCreate(BaseModel):
    teacher_id: UUID
    student_id: UUID
    class_date: date
    class_time: str = Field(pattern=r"^\d{2}:\d{2}$")
    duration: int = Field(default=60, ge=15, le=240)
    amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    subject: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class ClassRead(BaseModel):
    """Class session response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    teacher_id: UUID
    student_id: UUID
    class_date: date
    class_time: str
    duration: int
    amount: Decimal
    status: ClassStatusEnum
    payment_status: PaymentStatusEnum
    subject: str | None
    notes: str | None
    created_at: datetime


class TopStudent(BaseModel):
    student_id: UUID
    student_name: str
    total_spent: Decimal
    class_count: int


class MonthlyEarnings(BaseModel):
    month: str
    earnings: Decimal
    classes: int


class EarningsStats(BaseModel):
    teacher_id: UUID
    period: str
    total_earnings: Decimal
    this_month_earnings: Decimal
    last_month_earnings: Decimal
    total_classes: int
    completed_classes: int
    average_per_class: Decimal
    average_rating: float
    top_students: list[TopStudent]
    monthly_data: list[MonthlyEarnings]
    classes: list[ClassRead]


class VideoRoom(BaseModel):
    """Hand-off data for the external video-call client."""

    class_id: UUID
    room_name: str
    participant_role: Literal["teacher", "student"]
    peer_id: UUID
    status: ClassStatusEnum


class VideoCallEnded(BaseModel):
    class_id: UUID
    status: ClassStatusEnum
    redirect_to: str
