"""Admin repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.modules.admin.models import AdminAction


class AdminRepository:
    """Reads and appends the admin decision journal."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_action(self, **values: Any) -> AdminAction:
        action = AdminAction(**values)
        self.session.add(action)
        await self.session.flush()
        return action

    async def list_actions(
        self,
        *,
        target_type: str | None,
        target_id: UUID | None,
        limit: int,
        offset: int,
    ) -> tuple[list[AdminAction], int]:
        """Newest first, optionally narrowed to one target."""
        stmt = select(AdminAction)
        if target_type is not None:
            stmt = stmt.where(AdminAction.target_type == target_type)
        if target_id is not None:
            stmt = stmt.where(AdminAction.target_id == str(target_id))

        total = await self.session.scalar(select(func.count()).select_from(stmt.subquery()))
        rows = await self.session.scalars(stmt.order_by(AdminAction.created_at.desc()).limit(limit).offset(offset))
        return list(rows), int(total or 0)
