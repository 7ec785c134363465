"""Scheduling schemas."""

from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zabanyar.modules.scheduling.grid import DAYS, TIME_SLOTS


class ScheduleSlot(BaseModel):
    """Grid cell as exchanged with clients."""

    model_config = ConfigDict(from_attributes=True)

    day: str
    start_time: str
    end_time: str | None = None
    is_available: bool = False

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in DAYS:
            raise ValueError(f"day must be one of {', '.join(DAYS)}")
        return value

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, value: str) -> str:
        if value not in TIME_SLOTS:
            raise ValueError("start_time must be an hourly slot between 08:00 and 22:00")
        return value


class ScheduleReplaceRequest(BaseModel):
    slots: list[ScheduleSlot] = Field(default_factory=list)


class SchedulePresetRequest(BaseModel):
    preset: Literal["morning", "afternoon", "evening", "full"]


class ScheduleGrid(BaseModel):
    teacher_id: UUID
    days: list[str]
    time_slots: list[str]
    slots: list[ScheduleSlot]
    available_count: int


class ScheduleConsistency(BaseModel):
    """Drift between the schedule table and the profile's available days."""

    teacher_id: UUID
    schedule_days: list[str]
    profile_days: list[str]
    only_in_schedule: list[str]
    only_in_profile: list[str]
    consistent: bool
