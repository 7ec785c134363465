"""Students ORM models."""

from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import Date, Enum as SAEnum, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, JSONType, TimestampMixin, json_list_column
from zabanyar.core.enums import StudentStatusEnum

DEFAULT_NOTIFICATION_PREFERENCES: dict[str, bool] = {
    "email_notifications": True,
    "sms_notifications": False,
    "push_notifications": True,
    "class_reminders": True,
    "progress_updates": True,
    "promotional_emails": False,
}

DEFAULT_PRIVACY_SETTINGS: dict[str, Any] = {
    "profile_visibility": "public",
    "show_progress": True,
    "allow_messages": True,
    "show_online_status": True,
}


class Student(TimestampMixin, Base):
    """Student profile keyed by the owning user's id."""

    __tablename__ = "students"

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
    education_level: Mapped[str | None] = mapped_column(String(64), nullable=True)
    current_language_level: Mapped[str | None] = mapped_column(String(64), nullable=True)
    preferred_languages: Mapped[list[str]] = json_list_column()
    learning_goals: Mapped[str | None] = mapped_column(Text, nullable=True)
    preferred_learning_style: Mapped[str | None] = mapped_column(String(64), nullable=True)
    availability: Mapped[list[str]] = json_list_column()
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    notification_preferences: Mapped[dict[str, Any]] = mapped_column(
        JSONType,
        default=lambda: dict(DEFAULT_NOTIFICATION_PREFERENCES),
        nullable=False,
    )
    privacy_settings: Mapped[dict[str, Any]] = mapped_column(
        JSONType,
        default=lambda: dict(DEFAULT_PRIVACY_SETTINGS),
        nullable=False,
    )
    status: Mapped[StudentStatusEnum] = mapped_column(
        SAEnum(StudentStatusEnum, name="student_status_enum", native_enum=False),
        default=StudentStatusEnum.ACTIVE,
        nullable=False,
    )

    user = relationship("User", back_populates="student")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
