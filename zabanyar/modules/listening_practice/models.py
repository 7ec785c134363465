"""Listening practice ORM models."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, BaseModelMixin, json_list_column, utc_now

DEFAULT_QUESTION_POINTS = 10


class ListeningExercise(BaseModelMixin, Base):
    """Audio clip with a fixed set of comprehension questions."""

    __tablename__ = "listening_exercises"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    audio_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    transcript: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty_level: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    accent_type: Mapped[str | None] = mapped_column(String(32), index=True, nullable=True)
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True, nullable=False)

    questions: Mapped[list[ListeningQuestion]] = relationship(
        lazy="selectin",
        order_by="ListeningQuestion.order_index",
        cascade="all, delete-orphan",
    )


class ListeningQuestion(BaseModelMixin, Base):
    __tablename__ = "listening_questions"

    exercise_id: Mapped[UUID] = mapped_column(
        ForeignKey("listening_exercises.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_type: Mapped[str] = mapped_column(String(32), default="multiple_choice", nullable=False)
    options: Mapped[list[str]] = json_list_column(nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    points: Mapped[int] = mapped_column(Integer, default=DEFAULT_QUESTION_POINTS, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class ListeningSubmission(BaseModelMixin, Base):
    """One scored attempt; unlike writing, every attempt is kept."""

    __tablename__ = "listening_submissions"

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_id: Mapped[UUID] = mapped_column(
        ForeignKey("listening_exercises.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False)
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    time_taken: Mapped[int | None] = mapped_column(Integer, nullable=True)
    listening_attempts: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        index=True,
        nullable=False,
    )


class ListeningAnswer(BaseModelMixin, Base):
    __tablename__ = "listening_answers"

    submission_id: Mapped[UUID] = mapped_column(
        ForeignKey("listening_submissions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_id: Mapped[UUID] = mapped_column(
        ForeignKey("listening_questions.id", ondelete="CASCADE"),
        nullable=False,
    )
    student_answer: Mapped[str] = mapped_column(Text, default="", nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    points_earned: Mapped[int] = mapped_column(Integer, nullable=False)
