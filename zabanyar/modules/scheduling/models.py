"""Scheduling ORM models."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from zabanyar.core.database import Base, BaseModelMixin


class TeacherSchedule(BaseModelMixin, Base):
    """One bookable hour of a teacher's weekly template."""

    __tablename__ = "teacher_schedule"
    __table_args__ = (UniqueConstraint("teacher_id", "day", "start_time", name="teacher_day_start"),)

    teacher_id: Mapped[UUID] = mapped_column(
        ForeignKey("teachers.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    day: Mapped[str] = mapped_column(String(16), nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
