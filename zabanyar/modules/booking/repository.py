"""Booking repository layer."""

from __future__ import annotations

from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.enums import BookingStatusEnum
from zabanyar.modules.booking.models import Booking


class BookingRepository:
    """DB operations for booking domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def savepoint(self):
        """Nested transaction so a failed side effect does not poison the session."""
        return self.session.begin_nested()

    async def create_booking(self, **values: Any) -> Booking:
        booking = Booking(**values)
        self.session.add(booking)
        await self.session.flush()
        return booking

    async def get_booking_by_id(self, booking_id: UUID) -> Booking | None:
        return await self.session.get(Booking, booking_id)

    async def list_bookings(self, *, student_id: UUID | None, teacher_id: UUID | None) -> list[Booking]:
        stmt = select(Booking)
        if student_id is not None:
            stmt = stmt.where(Booking.student_id == student_id)
        if teacher_id is not None:
            stmt = stmt.where(Booking.teacher_id == teacher_id)
        stmt = stmt.order_by(Booking.created_at.desc())
        return list((await self.session.scalars(stmt)).all())

    async def count_by_status(self) -> dict[BookingStatusEnum, int]:
        stmt = select(Booking.status, func.count()).group_by(Booking.status)
        rows = (await self.session.execute(stmt)).all()
        return {status: int(count) for status, count in rows}

    async def total_revenue(self) -> Decimal:
        stmt = select(func.coalesce(func.sum(Booking.total_price), 0)).where(
            Booking.status != BookingStatusEnum.CANCELLED,
        )
        return Decimal((await self.session.scalar(stmt)) or 0)

    async def set_status(self, booking: Booking, status: BookingStatusEnum) -> Booking:
        booking.status = status
        await self.session.flush()
        return booking
