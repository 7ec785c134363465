"""News articles ORM models."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, BaseModelMixin, utc_now
from zabanyar.core.enums import ReadingStatusEnum


class Article(BaseModelMixin, Base):
    """Graded reading material."""

    __tablename__ = "articles"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(64), index=True, nullable=True)
    difficulty_level: Mapped[str | None] = mapped_column(String(32), index=True, nullable=True)
    published_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        index=True,
        nullable=False,
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True, nullable=False)
    view_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class ReadingProgress(BaseModelMixin, Base):
    """How far a student got through an article."""

    __tablename__ = "article_reading_progress"
    __table_args__ = (
        UniqueConstraint("student_id", "article_id", name="uq_article_reading_progress_student_article"),
    )

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    article_id: Mapped[UUID] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reading_status: Mapped[ReadingStatusEnum] = mapped_column(
        SAEnum(ReadingStatusEnum, name="reading_status_enum", native_enum=False),
        default=ReadingStatusEnum.READING,
        nullable=False,
    )
    progress_percentage: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    time_spent: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_read_position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    comprehension_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    article: Mapped[Article] = relationship(lazy="selectin")
