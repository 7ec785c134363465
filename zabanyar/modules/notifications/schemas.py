"""Notifications schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from zabanyar.core.enums import NotificationTypeEnum


class NotificationRead(BaseModel):
    """Notification response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    teacher_id: UUID | None
    type: NotificationTypeEnum
    title: str
    message: str
    read: bool
    created_at: datetime


class NotificationReadUpdate(BaseModel):
    id: UUID
    read: bool = True


class NotificationList(BaseModel):
    notifications: list[NotificationRead]
    success: bool = True


class NotificationEnvelope(BaseModel):
    notification: NotificationRead
    success: bool = True
