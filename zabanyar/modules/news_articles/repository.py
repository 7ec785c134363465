"""News articles repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.modules.news_articles.models import Article, ReadingProgress


class NewsArticlesRepository:
    """DB operations for articles and reading progress."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_articles(
        self,
        *,
        category: str | None,
        difficulty: str | None,
        featured_only: bool,
        limit: int,
        offset: int,
    ) -> list[Article]:
        stmt = select(Article).where(Article.is_active.is_(True))
        if category:
            stmt = stmt.where(Article.category == category)
        if difficulty:
            stmt = stmt.where(Article.difficulty_level == difficulty)
        if featured_only:
            stmt = stmt.where(Article.is_featured.is_(True))
        stmt = stmt.order_by(Article.published_date.desc()).limit(limit).offset(offset)
        return list((await self.session.scalars(stmt)).all())

    async def get_article(self, article_id: UUID) -> Article | None:
        return await self.session.get(Article, article_id)

    async def increment_views(self, article: Article) -> Article:
        article.view_count = (article.view_count or 0) + 1
        await self.session.flush()
        return article

    async def get_progress(self, student_id: UUID, article_id: UUID) -> ReadingProgress | None:
        stmt = select(ReadingProgress).where(
            ReadingProgress.student_id == student_id,
            ReadingProgress.article_id == article_id,
        )
        return await self.session.scalar(stmt)

    async def create_progress(self, **values: Any) -> ReadingProgress:
        progress = ReadingProgress(**values)
        self.session.add(progress)
        await self.session.flush()
        await self.session.refresh(progress, attribute_names=["article"])
        return progress

    async def update_progress(self, progress: ReadingProgress, **changes: Any) -> ReadingProgress:
        for key, value in changes.items():
            setattr(progress, key, value)
        await self.session.flush()
        return progress

    async def list_progress(self, student_id: UUID, *, article_id: UUID | None) -> list[ReadingProgress]:
        stmt = select(ReadingProgress).where(ReadingProgress.student_id == student_id)
        if article_id is not None:
            stmt = stmt.where(ReadingProgress.article_id == article_id)
        stmt = stmt.order_by(ReadingProgress.updated_at.desc())
        return list((await self.session.scalars(stmt)).all())
