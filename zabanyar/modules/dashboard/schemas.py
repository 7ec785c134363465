"""Dashboard schemas."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from zabanyar.modules.booking.schemas import BookingRead
from zabanyar.modules.notifications.schemas import NotificationRead


class TeacherAnalytics(BaseModel):
    total_students: int
    active_students: int
    total_classes: int
    completed_classes: int
    confirmed_classes: int
    pending_requests: int
    upcoming_classes: int
    completion_rate: int
    monthly_growth: int
    average_rating: float


class TeacherDashboard(BaseModel):
    teacher_id: UUID
    display_status: str
    analytics: TeacherAnalytics
    monthly_earnings: Decimal
    current_balance: Decimal
    upcoming: list[BookingRead]
    latest_notifications: list[NotificationRead]


class StudentAnalytics(BaseModel):
    total_classes: int
    completed_classes: int
    this_month_classes: int
    this_month_spent: Decimal


class StudentDashboard(BaseModel):
    student_id: UUID
    analytics: StudentAnalytics
    recent_bookings: list[BookingRead]
    unread_notifications: int
