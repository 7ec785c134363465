"""Booking ORM models."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zabanyar.core.database import Base, BaseModelMixin, json_list_column
from zabanyar.core.enums import BookingStatusEnum, PaymentStatusEnum


class Booking(BaseModelMixin, Base):
    """Session request from a student (possibly a guest) to a teacher."""

    __tablename__ = "bookings"

    teacher_id: Mapped[UUID] = mapped_column(
        ForeignKey("teachers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    student_name: Mapped[str] = mapped_column(String(255), nullable=False)
    student_email: Mapped[str] = mapped_column(String(255), nullable=False)
    student_phone: Mapped[str] = mapped_column(String(32), nullable=False)
    selected_days: Mapped[list[str]] = json_list_column(nullable=False)
    selected_hours: Mapped[list[str]] = json_list_column(nullable=False)
    session_type: Mapped[str] = mapped_column(String(64), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    number_of_sessions: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    payment_status: Mapped[PaymentStatusEnum] = mapped_column(
        SAEnum(PaymentStatusEnum, name="payment_status_enum", native_enum=False),
        default=PaymentStatusEnum.PENDING,
        nullable=False,
    )
    transaction_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    status: Mapped[BookingStatusEnum] = mapped_column(
        SAEnum(BookingStatusEnum, name="booking_status_enum", native_enum=False),
        default=BookingStatusEnum.PENDING,
        index=True,
        nullable=False,
    )
