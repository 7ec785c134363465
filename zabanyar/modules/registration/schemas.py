"""Registration wizard payloads."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from zabanyar.modules.students.schemas import StudentRead
from zabanyar.modules.teachers.schemas import TeacherRead


class TeacherRegistrationForm(BaseModel):
    """Flat record collected by the five-step teacher sign-up wizard."""

    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    gender: str | None = None
    birthdate: date | None = None
    national_id: str | None = None
    address: str | None = None

    languages: list[str] = Field(default_factory=list)
    levels: list[str] = Field(default_factory=list)
    class_types: list[str] = Field(default_factory=list)
    experience_years: int | None = None
    education: str | None = None
    bio: str | None = None

    available_days: list[str] = Field(default_factory=list)
    available_hours: list[str] = Field(default_factory=list)
    location: str | None = None
    hourly_rate: float | None = None
    max_students_per_class: int | None = None

    teaching_methods: list[str] = Field(default_factory=list)
    certificates: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)

    agree_to_terms: bool = False


class TeacherProfileCompletionForm(BaseModel):
    """Flat record collected by the four-step profile completion wizard."""

    phone: str | None = None
    gender: str | None = None
    birthdate: date | None = None
    national_id: str | None = None

    languages: list[str] = Field(default_factory=list)
    levels: list[str] = Field(default_factory=list)
    class_types: list[str] = Field(default_factory=list)
    experience_years: int | None = None
    education: str | None = None

    available_days: list[str] = Field(default_factory=list)
    available_hours: list[str] = Field(default_factory=list)
    max_students_per_class: int | None = None

    hourly_rate: float | None = None
    location: str | None = None
    bio: str | None = None
    teaching_methods: list[str] = Field(default_factory=list)
    certificates: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)


class StudentProfileCompletionForm(BaseModel):
    phone: str | None = None
    gender: str | None = None
    birthdate: date | None = None
    education_level: str | None = None
    current_language_level: str | None = None
    preferred_languages: list[str] = Field(default_factory=list)
    learning_goals: str | None = None
    preferred_learning_style: str | None = None
    availability: list[str] = Field(default_factory=list)
    notes: str | None = None


class StepValidationRequest(BaseModel):
    fields: dict[str, Any] = Field(default_factory=dict)


class StepValidationResult(BaseModel):
    wizard: str
    step: int
    total_steps: int
    can_advance: bool
    missing_fields: list[str]
    next_step: int
    notice: str | None = None


class TeacherRegistrationResult(BaseModel):
    teacher: TeacherRead
    redirect_to: str
    message: str


class TeacherCompletionResult(BaseModel):
    teacher: TeacherRead
    redirect_to: str
    message: str


class StudentCompletionResult(BaseModel):
    student: StudentRead
    redirect_to: str
    message: str
