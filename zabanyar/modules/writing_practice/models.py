"""Writing practice ORM models."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, BaseModelMixin, JSONType, json_list_column, utc_now

DEFAULT_EVALUATION_CRITERIA = {"grammar": 30, "vocabulary": 25, "coherence": 25, "creativity": 20}


class WritingExercise(BaseModelMixin, Base):
    """Writing prompt students respond to."""

    __tablename__ = "writing_exercises"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    topic_category: Mapped[str | None] = mapped_column(String(64), index=True, nullable=True)
    difficulty_level: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    word_limit_min: Mapped[int] = mapped_column(Integer, default=50, nullable=False)
    word_limit_max: Mapped[int] = mapped_column(Integer, default=500, nullable=False)
    estimated_time: Mapped[int] = mapped_column(Integer, default=15, nullable=False)
    evaluation_criteria: Mapped[dict[str, int]] = mapped_column(
        JSONType,
        default=lambda: dict(DEFAULT_EVALUATION_CRITERIA),
        nullable=False,
    )
    tips: Mapped[list[str]] = json_list_column(nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True, nullable=False)


class WritingSubmission(BaseModelMixin, Base):
    """Latest text a student wrote for an exercise, with its grading."""

    __tablename__ = "writing_submissions"

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_id: Mapped[UUID] = mapped_column(
        ForeignKey("writing_exercises.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    word_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    character_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    overall_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    grammar_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    vocabulary_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    coherence_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    creativity_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    auto_correction_data: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)
    improvement_suggestions: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONType, nullable=True)
    feedback: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_graded: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        index=True,
        nullable=False,
    )

    exercise: Mapped[WritingExercise] = relationship(lazy="selectin")


class WritingStatistics(BaseModelMixin, Base):
    """Per-student totals over the stored submissions."""

    __tablename__ = "writing_statistics"

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    total_submissions: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_words_written: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    average_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
