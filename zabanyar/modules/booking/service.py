"""Booking business logic layer."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import NotificationTypeEnum
from zabanyar.core.metrics import record_side_effect_failure
from zabanyar.modules.billing.repository import BillingRepository
from zabanyar.modules.billing.service import BillingService
from zabanyar.modules.booking.models import Booking
from zabanyar.modules.booking.repository import BookingRepository
from zabanyar.modules.booking.schemas import BookingCreate, BookingStatusUpdate
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.notifications.repository import NotificationsRepository
from zabanyar.modules.notifications.service import NotificationsService
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.shared.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)

REQUIRED_BOOKING_FIELDS = (
    "teacher_id",
    "student_name",
    "student_email",
    "student_phone",
    "selected_days",
    "selected_hours",
    "session_type",
    "duration",
    "total_price",
)

TEACHER_NOTIFICATION_TITLE = "کلاس جدید رزرو شد"
STUDENT_NOTIFICATION_TITLE = "کلاس با موفقیت رزرو شد"


def _joined(values: list[str]) -> str:
    return ",".join(values)


def teacher_booking_message(booking: Booking) -> str:
    return (
        f"{booking.student_name} کلاس {booking.session_type} سطح {_joined(booking.selected_days)} "
        f"را برای {_joined(booking.selected_hours)} رزرو کرد"
    )


def student_booking_message(booking: Booking) -> str:
    return (
        f"کلاس {booking.session_type} شما برای {_joined(booking.selected_days)} "
        f"در ساعت {_joined(booking.selected_hours)} رزرو شد"
    )


class BookingService:
    """Booking domain service."""

    def __init__(
        self,
        repository: BookingRepository,
        notifications_service: NotificationsService,
        billing_service: BillingService,
        teachers_repository: TeachersRepository,
    ) -> None:
        self.repository = repository
        self.notifications_service = notifications_service
        self.billing_service = billing_service
        self.teachers_repository = teachers_repository

    async def create_booking(self, payload: BookingCreate) -> Booking:
        """Insert the booking, then notify and pay out without failing the request."""
        values = payload.model_dump()
        missing = [name for name in REQUIRED_BOOKING_FIELDS if not values.get(name)]
        if missing:
            raise ValidationException("Missing required fields", details={"missing_fields": missing})

        teacher = await self.teachers_repository.get_teacher_by_id(payload.teacher_id)
        if teacher is None:
            raise NotFoundException("Teacher not found")

        values["notes"] = payload.notes or ""
        booking = await self.repository.create_booking(**values)
        logger.info("Booking %s created for teacher %s", booking.id, booking.teacher_id)

        await self._notify_participants(booking)
        await self._process_payment(booking)
        return booking

    async def _notify_participants(self, booking: Booking) -> None:
        recipients = [(booking.teacher_id, TEACHER_NOTIFICATION_TITLE, teacher_booking_message(booking))]
        if booking.student_id is not None:
            recipients.append((booking.student_id, STUDENT_NOTIFICATION_TITLE, student_booking_message(booking)))

        for user_id, title, message in recipients:
            try:
                async with self.repository.savepoint():
                    await self.notifications_service.notify(
                        user_id=user_id,
                        teacher_id=booking.teacher_id,
                        type=NotificationTypeEnum.SUCCESS,
                        title=title,
                        message=message,
                    )
            except Exception:
                logger.exception("Booking %s notification for %s failed", booking.id, user_id)
                record_side_effect_failure("booking_notification")

    async def _process_payment(self, booking: Booking) -> None:
        try:
            async with self.repository.savepoint():
                await self.billing_service.credit_booking(
                    booking_id=booking.id,
                    teacher_id=booking.teacher_id,
                    total_price=booking.total_price,
                )
        except Exception:
            logger.exception("Payment processing for booking %s failed", booking.id)
            record_side_effect_failure("booking_payment")

    async def list_bookings(
        self,
        *,
        student_id: UUID | None,
        teacher_id: UUID | None,
        actor,
    ) -> list[Booking]:
        if student_id is None and teacher_id is None:
            raise ValidationException("student_id or teacher_id is required")
        ensure_self_or_admin(actor, student_id if student_id is not None else teacher_id)
        return await self.repository.list_bookings(student_id=student_id, teacher_id=teacher_id)

    async def update_status(self, booking_id: UUID, payload: BookingStatusUpdate, actor) -> Booking:
        booking = await self.repository.get_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundException("Booking not found")
        ensure_self_or_admin(actor, booking.teacher_id)
        return await self.repository.set_status(booking, payload.status)


async def get_booking_service(session: AsyncSession = Depends(get_db_session)) -> BookingService:
    """Dependency provider for booking service."""
    return BookingService(
        repository=BookingRepository(session),
        notifications_service=NotificationsService(NotificationsRepository(session)),
        billing_service=BillingService(BillingRepository(session)),
        teachers_repository=TeachersRepository(session),
    )
