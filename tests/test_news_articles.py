from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any
from uuid import UUID, uuid4

import pytest

import zabanyar.modules.news_articles.service as news_service_module
from zabanyar.core.enums import ReadingStatusEnum, RoleEnum
from zabanyar.modules.news_articles.schemas import ReadingProgressUpdate
from zabanyar.modules.news_articles.service import NewsArticlesService, progress_values
from zabanyar.shared.exceptions import NotFoundException, UnauthorizedException, ValidationException

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@dataclass
class FakeArticle:
    id: UUID
    is_active: bool = True
    view_count: int = 0


@dataclass
class FakeNewsRepository:
    articles: dict[UUID, FakeArticle] = field(default_factory=dict)
    progress: dict[tuple[UUID, UUID], SimpleNamespace] = field(default_factory=dict)

    async def get_article(self, article_id: UUID):
        return self.articles.get(article_id)

    async def increment_views(self, article: FakeArticle) -> FakeArticle:
        article.view_count += 1
        return article

    async def get_progress(self, student_id: UUID, article_id: UUID):
        return self.progress.get((student_id, article_id))

    async def create_progress(self, **values: Any):
        row = SimpleNamespace(**{"id": uuid4(), "started_at": None, "completed_at": None, **values})
        self.progress[(row.student_id, row.article_id)] = row
        return row

    async def update_progress(self, row: SimpleNamespace, **values: Any):
        for key, value in values.items():
            setattr(row, key, value)
        return row


def make_actor(user_id: UUID, role: RoleEnum = RoleEnum.STUDENT) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, role=SimpleNamespace(name=role))


def test_progress_defaults_to_reading_and_stamps_start() -> None:
    values = progress_values(ReadingProgressUpdate(), is_new=True, now=NOW)

    assert values["reading_status"] == ReadingStatusEnum.READING
    assert values["progress_percentage"] == 0
    assert values["comprehension_score"] is None
    assert values["started_at"] == NOW
    assert "completed_at" not in values


def test_not_started_rows_get_no_start_time() -> None:
    values = progress_values(
        ReadingProgressUpdate(reading_status=ReadingStatusEnum.NOT_STARTED),
        is_new=True,
        now=NOW,
    )

    assert "started_at" not in values


def test_completion_stamps_completed_at_but_keeps_original_start() -> None:
    values = progress_values(
        ReadingProgressUpdate(reading_status=ReadingStatusEnum.COMPLETED, progress_percentage=100, notes=""),
        is_new=False,
        now=NOW,
    )

    assert values["completed_at"] == NOW
    assert values["notes"] is None
    assert "started_at" not in values


@pytest.mark.asyncio
async def test_get_article_counts_views_and_hides_inactive() -> None:
    active = FakeArticle(id=uuid4())
    hidden = FakeArticle(id=uuid4(), is_active=False)
    service = NewsArticlesService(FakeNewsRepository(articles={active.id: active, hidden.id: hidden}))

    await service.get_article(active.id)
    article = await service.get_article(active.id)

    assert article.view_count == 2
    with pytest.raises(NotFoundException):
        await service.get_article(hidden.id)
    with pytest.raises(NotFoundException):
        await service.get_article(uuid4())


@pytest.mark.asyncio
async def test_save_progress_upserts_one_row_per_student_and_article(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(news_service_module, "utc_now", lambda: NOW)
    article = FakeArticle(id=uuid4())
    repository = FakeNewsRepository(articles={article.id: article})
    service = NewsArticlesService(repository)
    student_id = uuid4()
    actor = make_actor(student_id)

    first = await service.save_progress(
        ReadingProgressUpdate(student_id=student_id, article_id=article.id, progress_percentage=40),
        actor,
    )
    second = await service.save_progress(
        ReadingProgressUpdate(
            student_id=student_id,
            article_id=article.id,
            reading_status=ReadingStatusEnum.COMPLETED,
            progress_percentage=100,
            comprehension_score=85,
        ),
        actor,
    )

    assert second is first
    assert len(repository.progress) == 1
    assert second.reading_status == ReadingStatusEnum.COMPLETED
    assert second.progress_percentage == 100
    assert second.comprehension_score == 85
    assert second.started_at == NOW
    assert second.completed_at == NOW


@pytest.mark.asyncio
async def test_save_progress_validates_ids_and_ownership() -> None:
    article = FakeArticle(id=uuid4())
    service = NewsArticlesService(FakeNewsRepository(articles={article.id: article}))
    student_id = uuid4()

    with pytest.raises(ValidationException) as exc:
        await service.save_progress(ReadingProgressUpdate(student_id=student_id), make_actor(student_id))
    assert exc.value.message == "Student ID and Article ID are required"

    with pytest.raises(UnauthorizedException):
        await service.save_progress(
            ReadingProgressUpdate(student_id=student_id, article_id=article.id),
            make_actor(uuid4()),
        )

    with pytest.raises(NotFoundException):
        await service.save_progress(
            ReadingProgressUpdate(student_id=student_id, article_id=uuid4()),
            make_actor(student_id),
        )
