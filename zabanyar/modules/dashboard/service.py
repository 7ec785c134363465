"""Dashboard aggregation service."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.modules.billing.repository import BillingRepository
from zabanyar.modules.billing.service import BillingService
from zabanyar.modules.booking.repository import BookingRepository
from zabanyar.modules.booking.schemas import BookingRead
from zabanyar.modules.classes.repository import ClassesRepository
from zabanyar.modules.dashboard import analytics
from zabanyar.modules.dashboard.schemas import (
    StudentAnalytics,
    StudentDashboard,
    TeacherAnalytics,
    TeacherDashboard,
)
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.notifications.repository import NotificationsRepository
from zabanyar.modules.notifications.schemas import NotificationRead
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.modules.teachers.service import display_status
from zabanyar.shared.exceptions import NotFoundException
from zabanyar.shared.inflight import InFlightGuard
from zabanyar.shared.utils import utc_now

logger = logging.getLogger(__name__)

LATEST_NOTIFICATIONS = 5

dashboard_guard = InFlightGuard("dashboard")


class DashboardService:
    """Builds dashboards from wholesale fetches of a user's rows."""

    def __init__(
        self,
        booking_repository: BookingRepository,
        classes_repository: ClassesRepository,
        teachers_repository: TeachersRepository,
        notifications_repository: NotificationsRepository,
        billing_service: BillingService,
        guard: InFlightGuard = dashboard_guard,
    ) -> None:
        self.booking_repository = booking_repository
        self.classes_repository = classes_repository
        self.teachers_repository = teachers_repository
        self.notifications_repository = notifications_repository
        self.billing_service = billing_service
        self.guard = guard

    async def teacher_dashboard(self, teacher_id: UUID, actor) -> TeacherDashboard:
        ensure_self_or_admin(actor, teacher_id)
        async with self.guard.hold(f"teacher:{teacher_id}"):
            teacher = await self.teachers_repository.get_teacher_by_id(teacher_id)
            if teacher is None:
                raise NotFoundException("Teacher not found")

            bookings = await self.booking_repository.list_bookings(student_id=None, teacher_id=teacher_id)
            notifications = await self.notifications_repository.list_notifications(user_id=teacher_id, teacher_id=None)
            earnings = await self.billing_service.earnings_summary(teacher_id, actor)

        return TeacherDashboard(
            teacher_id=teacher_id,
            display_status=display_status(teacher.status),
            analytics=TeacherAnalytics(**analytics.teacher_analytics(bookings, teacher.average_rating)),
            monthly_earnings=earnings.monthly_earnings,
            current_balance=earnings.current_balance,
            upcoming=[BookingRead.model_validate(item) for item in analytics.upcoming_bookings(bookings)],
            latest_notifications=[
                NotificationRead.model_validate(item) for item in notifications[:LATEST_NOTIFICATIONS]
            ],
        )

    async def student_dashboard(self, student_id: UUID, actor) -> StudentDashboard:
        ensure_self_or_admin(actor, student_id)
        async with self.guard.hold(f"student:{student_id}"):
            classes = await self.classes_repository.list_classes(student_id=student_id)
            bookings = await self.booking_repository.list_bookings(student_id=student_id, teacher_id=None)
            unread = await self.notifications_repository.count_unread(student_id)

        return StudentDashboard(
            student_id=student_id,
            analytics=StudentAnalytics(**analytics.student_analytics(classes, utc_now().date())),
            recent_bookings=[
                BookingRead.model_validate(item) for item in bookings[: analytics.RECENT_BOOKINGS_LIMIT]
            ],
            unread_notifications=unread,
        )


async def get_dashboard_service(session: AsyncSession = Depends(get_db_session)) -> DashboardService:
    """Dependency provider for dashboard service."""
    return DashboardService(
        booking_repository=BookingRepository(session),
        classes_repository=ClassesRepository(session),
        teachers_repository=TeachersRepository(session),
        notifications_repository=NotificationsRepository(session),
        billing_service=BillingService(BillingRepository(session)),
    )
