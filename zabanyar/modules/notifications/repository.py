"""Notifications repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.enums import NotificationTypeEnum
from zabanyar.modules.notifications.models import Notification


class NotificationsRepository:
    """DB access for notifications domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_notification(
        self,
        *,
        user_id: UUID,
        teacher_id: UUID | None,
        type: NotificationTypeEnum,
        title: str,
        message: str,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            teacher_id=teacher_id,
            type=type,
            title=title,
            message=message,
            read=False,
        )
        self.session.add(notification)
        await self.session.flush()
        return notification

    async def get_notification_by_id(self, notification_id: UUID) -> Notification | None:
        return await self.session.get(Notification, notification_id)

    async def list_notifications(self, *, user_id: UUID | None, teacher_id: UUID | None) -> list[Notification]:
        stmt = select(Notification)
        if user_id is not None:
            stmt = stmt.where(Notification.user_id == user_id)
        if teacher_id is not None:
            stmt = stmt.where(Notification.teacher_id == teacher_id)
        stmt = stmt.order_by(Notification.created_at.desc())
        return list((await self.session.scalars(stmt)).all())

    async def count_unread(self, user_id: UUID) -> int:
        stmt = select(func.count()).where(Notification.user_id == user_id, Notification.read.is_(False))
        return int((await self.session.scalar(stmt)) or 0)

    async def set_read(self, notification: Notification, read: bool) -> Notification:
        notification.read = read
        await self.session.flush()
        return notification
