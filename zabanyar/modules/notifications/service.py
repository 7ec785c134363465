"""Notifications business logic layer."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import NotificationTypeEnum
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.notifications.models import Notification
from zabanyar.modules.notifications.repository import NotificationsRepository
from zabanyar.shared.exceptions import NotFoundException, ValidationException


class NotificationsService:
    """Notifications domain service."""

    def __init__(self, repository: NotificationsRepository) -> None:
        self.repository = repository

    async def notify(
        self,
        *,
        user_id: UUID,
        title: str,
        message: str,
        teacher_id: UUID | None = None,
        type: NotificationTypeEnum = NotificationTypeEnum.INFO,
    ) -> Notification:
        """Store an unread notification for ``user_id``."""
        return await self.repository.create_notification(
            user_id=user_id,
            teacher_id=teacher_id,
            type=type,
            title=title,
            message=message,
        )

    async def list_notifications(
        self,
        *,
        user_id: UUID | None,
        teacher_id: UUID | None,
        actor,
    ) -> list[Notification]:
        if user_id is None and teacher_id is None:
            raise ValidationException("user_id or teacher_id is required")
        ensure_self_or_admin(actor, user_id if user_id is not None else teacher_id)
        return await self.repository.list_notifications(user_id=user_id, teacher_id=teacher_id)

    async def mark_read(self, notification_id: UUID, read: bool, actor) -> Notification:
        notification = await self.repository.get_notification_by_id(notification_id)
        if notification is None:
            raise NotFoundException("Notification not found")
        ensure_self_or_admin(actor, notification.user_id)
        return await self.repository.set_read(notification, read)


async def get_notifications_service(session: AsyncSession = Depends(get_db_session)) -> NotificationsService:
    """Dependency provider for notifications service."""
    return NotificationsService(NotificationsRepository(session))
