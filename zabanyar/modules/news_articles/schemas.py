"""News articles schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from zabanyar.core.enums import ReadingStatusEnum


class ArticleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    summary: str | None
    category: str | None
    difficulty_level: str | None
    published_date: datetime
    is_featured: bool
    view_count: int


class ArticleList(BaseModel):
    articles: list[ArticleRead]
    total: int


class ReadingProgressUpdate(BaseModel):
    """Progress write; student and article ids are checked by the service."""

    student_id: UUID | None = None
    article_id: UUID | None = None
    reading_status: ReadingStatusEnum | None = None
    progress_percentage: int | None = Field(default=None, ge=0, le=100)
    time_spent: int | None = Field(default=None, ge=0)
    last_read_position: int | None = Field(default=None, ge=0)
    comprehension_score: int | None = Field(default=None, ge=0, le=100)
    notes: str | None = None


class ReadingProgressRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    student_id: UUID
    article_id: UUID
    reading_status: ReadingStatusEnum
    progress_percentage: int
    time_spent: int
    last_read_position: int
    comprehension_score: int | None
    notes: str | None
    started_at: datetime | None
    completed_at: datetime | None
    updated_at: datetime
    article: ArticleRead | None = None


class ReadingProgressList(BaseModel):
    progress: list[ReadingProgressRead]
    total: int
