from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any
from uuid import UUID, uuid4

import pytest

from zabanyar.core.enums import NotificationTypeEnum, RoleEnum
from zabanyar.modules.notifications.service import NotificationsService
from zabanyar.shared.exceptions import NotFoundException, UnauthorizedException, ValidationException


class FakeNotificationsRepository:
    def __init__(self) -> None:
        self.items: dict[UUID, SimpleNamespace] = {}

    async def create_notification(self, **values: Any) -> SimpleNamespace:
        item = SimpleNamespace(
            id=uuid4(),
            read=False,
            created_at=datetime(2026, 10, 19, tzinfo=timezone.utc),
            **values,
        )
        self.items[item.id] = item
        return item

    async def get_notification_by_id(self, notification_id: UUID):
        return self.items.get(notification_id)

    async def list_notifications(self, *, user_id: UUID | None, teacher_id: UUID | None):
        return [
            item
            for item in self.items.values()
            if (user_id is None or item.user_id == user_id) and (teacher_id is None or item.teacher_id == teacher_id)
        ]

    async def set_read(self, notification: SimpleNamespace, read: bool) -> SimpleNamespace:
        notification.read = read
        return notification


def make_actor(user_id: UUID, role: RoleEnum = RoleEnum.STUDENT) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, role=SimpleNamespace(name=role))


@pytest.mark.asyncio
async def test_notify_stores_unread_info_notification() -> None:
    service = NotificationsService(FakeNotificationsRepository())
    user_id = uuid4()

    item = await service.notify(user_id=user_id, title="سلام", message="خوش آمدید")

    assert item.type == NotificationTypeEnum.INFO
    assert item.teacher_id is None
    assert item.read is False


@pytest.mark.asyncio
async def test_list_requires_an_owner_filter() -> None:
    service = NotificationsService(FakeNotificationsRepository())
    user_id = uuid4()
    await service.notify(user_id=user_id, title="a", message="b")
    await service.notify(user_id=uuid4(), title="c", message="d")

    with pytest.raises(ValidationException):
        await service.list_notifications(user_id=None, teacher_id=None, actor=make_actor(user_id))
    with pytest.raises(UnauthorizedException):
        await service.list_notifications(user_id=user_id, teacher_id=None, actor=make_actor(uuid4()))

    items = await service.list_notifications(user_id=user_id, teacher_id=None, actor=make_actor(user_id))
    assert [item.title for item in items] == ["a"]


@pytest.mark.asyncio
async def test_mark_read_is_limited_to_the_recipient() -> None:
    service = NotificationsService(FakeNotificationsRepository())
    user_id = uuid4()
    item = await service.notify(user_id=user_id, title="a", message="b")

    with pytest.raises(UnauthorizedException):
        await service.mark_read(item.id, True, make_actor(uuid4()))
    with pytest.raises(NotFoundException):
        await service.mark_read(uuid4(), True, make_actor(user_id))

    assert (await service.mark_read(item.id, True, make_actor(user_id))).read is True
    assert (await service.mark_read(item.id, False, make_actor(uuid4(), RoleEnum.ADMIN))).read is False
