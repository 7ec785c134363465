"""Listening practice schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class QuestionCreate(BaseModel):
    question_text: str = Field(min_length=1)
    question_type: str = Field(default="multiple_choice", max_length=32)
    options: list[str] = Field(default_factory=list)
    correct_answer: str = Field(min_length=1)
    points: int | None = Field(default=None, ge=1)


class ExerciseCreate(BaseModel):
    """New exercise; title, audio, difficulty and at least one question are checked by the service."""

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    audio_url: str | None = Field(default=None, max_length=1024)
    transcript: str | None = None
    difficulty_level: str | None = Field(default=None, max_length=32)
    accent_type: str | None = Field(default=None, max_length=32)
    duration_seconds: int | None = Field(default=None, ge=1)
    questions: list[QuestionCreate] = Field(default_factory=list)


class QuestionRead(BaseModel):
    """Question as shown to students; the expected answer stays server side."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    question_text: str
    question_type: str
    options: list[str]
    points: int
    order_index: int


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    audio_url: str
    difficulty_level: str
    accent_type: str | None
    duration_seconds: int | None
    is_active: bool
    created_at: datetime
    questions: list[QuestionRead]


class ExerciseList(BaseModel):
    exercises: list[ExerciseRead]
    total: int


class SubmissionCreate(BaseModel):
    student_id: UUID | None = None
    exercise_id: UUID | None = None
    answers: dict[UUID, str] | None = None
    time_taken: int | None = Field(default=None, ge=0)
    listening_attempts: int | None = Field(default=None, ge=1)


class AnswerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question_id: UUID
    student_answer: str
    is_correct: bool
    points_earned: int


class SubmitResult(BaseModel):
    submission_id: UUID
    score: int
    correct_answers: int
    total_questions: int
    answers: list[AnswerRead]


class SubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_id: UUID
    total_questions: int
    correct_answers: int
    score: int
    time_taken: int | None
    listening_attempts: int
    submitted_at: datetime


class SubmissionList(BaseModel):
    submissions: list[SubmissionRead]
    total: int
