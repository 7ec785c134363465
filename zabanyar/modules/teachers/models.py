"""Teachers ORM models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum as SAEnum, Float, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, JSONType, TimestampMixin, json_list_column
from zabanyar.core.enums import TeacherStatusEnum


class Teacher(TimestampMixin, Base):
    """Teacher profile; the primary key is the owning user's id."""

    __tablename__ = "teachers"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(16), nullable=True)
    birthdate: Mapped[date | None] = mapped_column(Date, nullable=True)
    national_id: Mapped[str | None] = mapped_column(String(32), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(128), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    education: Mapped[str | None] = mapped_column(Text, nullable=True)
    experience_years: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    languages: Mapped[list[str]] = json_list_column()
    levels: Mapped[list[str]] = json_list_column()
    class_types: Mapped[list[str]] = json_list_column()
    available_days: Mapped[list[str]] = json_list_column()
    available_hours: Mapped[list[str]] = json_list_column()
    teaching_methods: Mapped[list[str]] = json_list_column()
    certificates: Mapped[list[str]] = json_list_column()
    achievements: Mapped[list[str]] = json_list_column()

    hourly_rate: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    max_students_per_class: Mapped[int | None] = mapped_column(Integer, nullable=True)

    status: Mapped[TeacherStatusEnum] = mapped_column(
        SAEnum(TeacherStatusEnum, name="teacher_status_enum", native_enum=False),
        default=TeacherStatusEnum.PENDING,
        index=True,
        nullable=False,
    )
    available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    average_rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    preferences: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)

    user = relationship("User", back_populates="teacher")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
