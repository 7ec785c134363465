"""Class session ORM models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, Enum as SAEnum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, BaseModelMixin
from zabanyar.core.enums import ClassStatusEnum, PaymentStatusEnum
from zabanyar.modules.students.models import Student


class ClassSession(BaseModelMixin, Base):
    """A scheduled lesson between one teacher and one student."""

    __tablename__ = "classes"

    teacher_id: Mapped[UUID] = mapped_column(
        ForeignKey("teachers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    class_date: Mapped[date] = mapped_column(Date, nullable=False)
    class_time: Mapped[str] = mapped_column(String(5), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, default=60, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0.00"), nullable=False)
    status: Mapped[ClassStatusEnum] = mapped_column(
        SAEnum(ClassStatusEnum, name="class_status_enum", native_enum=False),
        default=ClassStatusEnum.SCHEDULED,
        index=True,
        nullable=False,
    )
    payment_status: Mapped[PaymentStatusEnum] = mapped_column(
        SAEnum(PaymentStatusEnum, name="payment_status_enum", native_enum=False),
        default=PaymentStatusEnum.PENDING,
        nullable=False,
    )
    subject: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    student: Mapped[Student] = relationship(lazy="selectin")
