"""Writing practice schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCreate(BaseModel):
    """New exercise; title, prompt and difficulty are checked by the service."""

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    prompt: str | None = None
    topic_category: str | None = Field(default=None, max_length=64)
    difficulty_level: str | None = Field(default=None, max_length=32)
    word_limit_min: int | None = Field(default=None, ge=1)
    word_limit_max: int | None = Field(default=None, ge=1)
    estimated_time: int | None = Field(default=None, ge=1)
    evaluation_criteria: dict[str, int] | None = None
    tips: list[str] | None = None


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    prompt: str
    topic_category: str | None
    difficulty_level: str
    word_limit_min: int
    word_limit_max: int
    estimated_time: int
    evaluation_criteria: dict[str, int]
    tips: list[str]
    is_active: bool
    created_at: datetime


class ExerciseList(BaseModel):
    exercises: list[ExerciseRead]
    total: int


class ExerciseSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    prompt: str
    difficulty_level: str
    topic_category: str | None


class SubmissionCreate(BaseModel):
    student_id: UUID | None = None
    exercise_id: UUID | None = None
    content: str | None = None


class AutoCorrectRequest(BaseModel):
    submission_id: UUID | None = None
    exercise_id: UUID | None = None
    content: str | None = None


class GrammarErrorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    original: str
    corrected: str
    start: int
    end: int
    explanation: str
    severity: str


class ImprovementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    original: str
    suggested: str
    explanation: str
    priority: str


class ScoresRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    overall: int
    grammar: int
    vocabulary: int
    coherence: int
    creativity: int


class CorrectionRead(BaseModel):
    """Outcome of the automatic grader."""

    word_count: int
    character_count: int
    scores: ScoresRead
    grammar_errors: list[GrammarErrorRead]
    improvements: list[ImprovementRead]
    feedback: str


class SubmitResult(BaseModel):
    submission_id: UUID
    correction: CorrectionRead | None = None


class SubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    student_id: UUID
    exercise_id: UUID
    content: str
    word_count: int
    character_count: int
    overall_score: int | None
    grammar_score: int | None
    vocabulary_score: int | None
    coherence_score: int | None
    creativity_score: int | None
    auto_correction_data: dict[str, Any] | None
    improvement_suggestions: list[dict[str, Any]] | None
    feedback: str | None
    is_graded: bool
    submitted_at: datetime
    updated_at: datetime
    exercise: ExerciseSummary | None = None


class SubmissionList(BaseModel):
    submissions: list[SubmissionRead]
    total: int


class SubmissionDeleted(BaseModel):
    submission_id: UUID
    exercise_id: UUID
    message: str = "Submission deleted successfully"


class RecentSubmission(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    overall_score: int | None
    word_count: int
    submitted_at: datetime


class WritingStatisticsRead(BaseModel):
    """Stored totals plus the improvement trend of the latest submissions."""

    student_id: UUID
    total_submissions: int
    total_words_written: int
    average_score: float
    improvement_rate: float = 0.0
    recent_submissions: list[RecentSubmission] = Field(default_factory=list)
