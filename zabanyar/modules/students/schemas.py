"""Students schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from zabanyar.core.enums import StudentStatusEnum


class StudentRead(BaseModel):
    """Student profile response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: EmailStr
    phone: str | None
    gender: str | None
    birthdate: date | None
    education_level: str | None
    current_language_level: str | None
    preferred_languages: list[str] | None
    learning_goals: str | None
    preferred_learning_style: str | None
    availability: list[str] | None
    notes: str | None
    avatar: str | None
    notification_preferences: dict[str, Any]
    privacy_settings: dict[str, Any]
    status: StudentStatusEnum
    created_at: datetime
    updated_at: datetime


class StudentUpdate(BaseModel):
    """Partial student profile update."""

    id: UUID
    first_name: str | None = Field(default=None, max_length=128)
    last_name: str | None = Field(default=None, max_length=128)
    phone: str | None = Field(default=None, max_length=32)
    gender: str | None = Field(default=None, max_length=16)
    birthdate: date | None = None
    education_level: str | None = Field(default=None, max_length=64)
    current_language_level: str | None = Field(default=None, max_length=64)
    preferred_languages: list[str] | None = None
    learning_goals: str | None = None
    preferred_learning_style: str | None = Field(default=None, max_length=64)
    availability: list[str] | None = None
    notes: str | None = None
    notification_preferences: dict[str, Any] | None = None
    privacy_settings: dict[str, Any] | None = None


class StudentProfileResponse(BaseModel):
    student: StudentRead
    message: str | None = None
