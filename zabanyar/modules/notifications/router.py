"""Notifications API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zabanyar.modules.identity.service import get_current_user
from zabanyar.modules.notifications.schemas import (
    NotificationEnvelope,
    NotificationList,
    NotificationRead,
    NotificationReadUpdate,
)
from zabanyar.modules.notifications.service import NotificationsService, get_notifications_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationList)
async def list_notifications(
    user_id: UUID | None = Query(default=None),
    teacher_id: UUID | None = Query(default=None),
    service: NotificationsService = Depends(get_notifications_service),
    current_user=Depends(get_current_user),
) -> NotificationList:
    """List notifications newest first."""
    items = await service.list_notifications(user_id=user_id, teacher_id=teacher_id, actor=current_user)
    return NotificationList(notifications=[NotificationRead.model_validate(item) for item in items])


@router.patch("", response_model=NotificationEnvelope)
async def mark_notification(
    payload: NotificationReadUpdate,
    service: NotificationsService = Depends(get_notifications_service),
    current_user=Depends(get_current_user),
) -> NotificationEnvelope:
    """Set the read flag (defaults to read)."""
    notification = await service.mark_read(payload.id, payload.read, current_user)
    return NotificationEnvelope(notification=NotificationRead.model_validate(notification))
