"""Teachers schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from zabanyar.core.enums import TeacherStatusEnum


class TeacherRead(BaseModel):
    """Teacher profile response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: EmailStr
    phone: str | None
    gender: str | None
    birthdate: date | None
    national_id: str | None
    address: str | None
    location: str | None
    bio: str | None
    education: str | None
    experience_years: int
    languages: list[str] | None
    levels: list[str] | None
    class_types: list[str] | None
    available_days: list[str] | None
    available_hours: list[str] | None
    teaching_methods: list[str] | None
    certificates: list[str] | None
    achievements: list[str] | None
    hourly_rate: float | None
    max_students_per_class: int | None
    status: TeacherStatusEnum
    available: bool
    avatar: str | None
    average_rating: float
    preferences: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime


class TeacherCard(BaseModel):
    """Public listing entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    location: str | None
    bio: str | None
    experience_years: int
    languages: list[str] | None
    levels: list[str] | None
    class_types: list[str] | None
    hourly_rate: float | None
    avatar: str | None
    average_rating: float


class TeacherUpdate(BaseModel):
    """Partial profile update; only fields present in the body are written."""

    id: UUID
    first_name: str | None = Field(default=None, max_length=128)
    last_name: str | None = Field(default=None, max_length=128)
    phone: str | None = Field(default=None, max_length=32)
    gender: str | None = Field(default=None, max_length=16)
    birthdate: date | None = None
    national_id: str | None = Field(default=None, max_length=32)
    address: str | None = None
    location: str | None = Field(default=None, max_length=128)
    bio: str | None = Field(default=None, max_length=5000)
    education: str | None = None
    experience_years: int | None = Field(default=None, ge=0, le=80)
    languages: list[str] | None = None
    levels: list[str] | None = None
    class_types: list[str] | None = None
    available_days: list[str] | None = None
    available_hours: list[str] | None = None
    teaching_methods: list[str] | None = None
    certificates: list[str] | None = None
    achievements: list[str] | None = None
    hourly_rate: float | None = Field(default=None, ge=0)
    max_students_per_class: int | None = Field(default=None, ge=1)
    available: bool | None = None
    preferences: dict[str, Any] | None = None
    status: TeacherStatusEnum | None = None


class TeacherProfileResponse(BaseModel):
    teacher: TeacherRead
    display_status: str
    message: str | None = None
