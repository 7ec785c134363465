"""Booking schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from zabanyar.core.enums import BookingStatusEnum, PaymentStatusEnum


class BookingCreate(BaseModel):
    """Booking request; required fields are checked by the service."""

    teacher_id: UUID | None = None
    student_id: UUID | None = None
    student_name: str | None = Field(default=None, max_length=255)
    student_email: str | None = Field(default=None, max_length=255)
    student_phone: str | None = Field(default=None, max_length=32)
    selected_days: list[str] = Field(default_factory=list)
    selected_hours: list[str] = Field(default_factory=list)
    session_type: str | None = Field(default=None, max_length=64)
    duration: int | None = Field(default=None, ge=0)
    total_price: Decimal | None = Field(default=None, ge=0)
    number_of_sessions: int = Field(default=1, ge=1)
    notes: str | None = None
    payment_status: PaymentStatusEnum = PaymentStatusEnum.PENDING
    transaction_id: str | None = Field(default=None, max_length=128)


class BookingStatusUpdate(BaseModel):
    status: BookingStatusEnum


class BookingRead(BaseModel):
    """Booking response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    teacher_id: UUID
    student_id: UUID | None
    student_name: str
    student_email: str
    student_phone: str
    selected_days: list[str]
    selected_hours: list[str]
    session_type: str
    duration: int
    number_of_sessions: int
    total_price: Decimal
    notes: str
    payment_status: PaymentStatusEnum
    transaction_id: str | None
    status: BookingStatusEnum
    created_at: datetime
    updated_at: datetime


class BookingEnvelope(BaseModel):
    booking: BookingRead
    success: bool = True
    message: str | None = None


class BookingList(BaseModel):
    bookings: list[BookingRead]
    success: bool = True
