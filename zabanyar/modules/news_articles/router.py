"""News articles API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zabanyar.modules.identity.service import get_current_user
from zabanyar.modules.news_articles.schemas import (
    ArticleList,
    ArticleRead,
    ReadingProgressList,
    ReadingProgressRead,
    ReadingProgressUpdate,
)
from zabanyar.modules.news_articles.service import NewsArticlesService, get_news_articles_service
from zabanyar.shared.pagination import PaginationParams, get_pagination_params

router = APIRouter(prefix="/news-articles", tags=["news-articles"])


@router.get("/articles", response_model=ArticleList)
async def list_articles(
    category: str | None = Query(default=None, max_length=64),
    difficulty: str | None = Query(default=None, max_length=32),
    featured: bool = Query(default=False),
    pagination: PaginationParams = Depends(get_pagination_params),
    service: NewsArticlesService = Depends(get_news_articles_service),
) -> ArticleList:
    """Active articles, most recently published first."""
    items = await service.list_articles(
        category=category,
        difficulty=difficulty,
        featured_only=featured,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return ArticleList(articles=[ArticleRead.model_validate(item) for item in items], total=len(items))


@router.get("/articles/{article_id}", response_model=ArticleRead)
async def get_article(
    article_id: UUID,
    service: NewsArticlesService = Depends(get_news_articles_service),
) -> ArticleRead:
    article = await service.get_article(article_id)
    return ArticleRead.model_validate(article)


@router.post("/progress", response_model=ReadingProgressRead)
async def save_progress(
    payload: ReadingProgressUpdate,
    service: NewsArticlesService = Depends(get_news_articles_service),
    current_user=Depends(get_current_user),
) -> ReadingProgressRead:
    """Create or replace the student's progress on an article."""
    progress = await service.save_progress(payload, current_user)
    return ReadingProgressRead.model_validate(progress)


@router.get("/progress", response_model=ReadingProgressList)
async def list_progress(
    student_id: UUID | None = Query(default=None),
    article_id: UUID | None = Query(default=None),
    service: NewsArticlesService = Depends(get_news_articles_service),
    current_user=Depends(get_current_user),
) -> ReadingProgressList:
    items = await service.list_progress(student_id, article_id, current_user)
    return ReadingProgressList(
        progress=[ReadingProgressRead.model_validate(item) for item in items],
        total=len(items),
    )
