"""News articles business logic layer."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import get_db_session
from zabanyar.core.enums import ReadingStatusEnum
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.news_articles.models import Article, ReadingProgress
from zabanyar.modules.news_articles.repository import NewsArticlesRepository
from zabanyar.modules.news_articles.schemas import ReadingProgressUpdate
from zabanyar.shared.exceptions import NotFoundException, ValidationException
from zabanyar.shared.utils import utc_now

logger = logging.getLogger(__name__)


def progress_values(payload: ReadingProgressUpdate, *, is_new: bool, now: datetime) -> dict[str, Any]:
    """Column values for a progress write.

    Every write replaces the tracked figures. ``started_at`` is stamped only
    when the row is created in a state other than not-started, and
    ``completed_at`` whenever the status is completed.
    """
    status = payload.reading_status or ReadingStatusEnum.READING
    values: dict[str, Any] = {
        "reading_status": status,
        "progress_percentage": payload.progress_percentage or 0,
        "time_spent": payload.time_spent or 0,
        "last_read_position": payload.last_read_position or 0,
        "comprehension_score": payload.comprehension_score or None,
        "notes": payload.notes or None,
    }
    if status == ReadingStatusEnum.COMPLETED:
        values["completed_at"] = now
    if is_new and status != ReadingStatusEnum.NOT_STARTED:
        values["started_at"] = now
    return values


class NewsArticlesService:
    """Articles catalogue and reading progress."""

    def __init__(self, repository: NewsArticlesRepository) -> None:
        self.repository = repository

    async def list_articles(
        self,
        *,
        category: str | None,
        difficulty: str | None,
        featured_only: bool,
        limit: int,
        offset: int,
    ) -> list[Article]:
        return await self.repository.list_articles(
            category=category,
            difficulty=difficulty,
            featured_only=featured_only,
            limit=limit,
            offset=offset,
        )

    async def get_article(self, article_id: UUID) -> Article:
        article = await self.repository.get_article(article_id)
        if article is None or not article.is_active:
            raise NotFoundException("Article not found")
        return await self.repository.increment_views(article)

    async def save_progress(self, payload: ReadingProgressUpdate, actor) -> ReadingProgress:
        if payload.student_id is None or payload.article_id is None:
            raise ValidationException("Student ID and Article ID are required")
        ensure_self_or_admin(actor, payload.student_id)
        if await self.repository.get_article(payload.article_id) is None:
            raise NotFoundException("Article not found")

        existing = await self.repository.get_progress(payload.student_id, payload.article_id)
        values = progress_values(payload, is_new=existing is None, now=utc_now())
        if existing is not None:
            return await self.repository.update_progress(existing, **values)

        logger.info("Student %s started article %s", payload.student_id, payload.article_id)
        return await self.repository.create_progress(
            student_id=payload.student_id,
            article_id=payload.article_id,
            **values,
        )

    async def list_progress(self, student_id: UUID | None, article_id: UUID | None, actor) -> list[ReadingProgress]:
        if student_id is None:
            raise ValidationException("Student ID is required")
        ensure_self_or_admin(actor, student_id)
        return await self.repository.list_progress(student_id, article_id=article_id)


async def get_news_articles_service(session: AsyncSession = Depends(get_db_session)) -> NewsArticlesService:
    """Dependency provider for news articles service."""
    return NewsArticlesService(NewsArticlesRepository(session))
