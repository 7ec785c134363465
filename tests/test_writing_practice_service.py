from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any
from uuid import UUID, uuid4

import pytest

import zabanyar.modules.writing_practice.service as writing_service_module
from zabanyar.core.enums import RoleEnum
from zabanyar.modules.writing_practice import autocorrect
from zabanyar.modules.writing_practice.schemas import AutoCorrectRequest, ExerciseCreate, SubmissionCreate
from zabanyar.modules.writing_practice.service import WritingPracticeService, improvement_rate
from zabanyar.shared.exceptions import NotFoundException, UnauthorizedException, ValidationException

BASE_TIME = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)
ESSAY = "My last holiday was wonderful. We visited a beautiful city, and we ate delicious food. It was great."


@dataclass
class FakeSubmission:
    id: UUID
    student_id: UUID
    exercise_id: UUID
    content: str
    word_count: int
    character_count: int
    submitted_at: datetime
    overall_score: int | None = None
    grammar_score: int | None = None
    vocabulary_score: int | None = None
    coherence_score: int | None = None
    creativity_score: int | None = None
    auto_correction_data: dict[str, Any] | None = None
    improvement_suggestions: list[dict[str, Any]] | None = None
    feedback: str | None = None
    is_graded: bool = False


@dataclass
class FakeStatistics:
    student_id: UUID
    total_submissions: int = 0
    total_words_written: int = 0
    average_score: float = 0.0


@dataclass
class FakeWritingRepository:
    exercises: dict[UUID, SimpleNamespace] = field(default_factory=dict)
    submissions: dict[UUID, FakeSubmission] = field(default_factory=dict)
    statistics: dict[UUID, FakeStatistics] = field(default_factory=dict)
    created_exercises: list[dict[str, Any]] = field(default_factory=list)

    @asynccontextmanager
    async def savepoint(self):
        yield

    async def create_exercise(self, **values: Any):
        self.created_exercises.append(values)
        return SimpleNamespace(id=uuid4(), **values)

    async def get_exercise(self, exercise_id: UUID):
        return self.exercises.get(exercise_id)

    async def get_submission(self, submission_id: UUID):
        return self.submissions.get(submission_id)

    async def get_latest_submission(self, student_id: UUID, exercise_id: UUID):
        matching = [
            item
            for item in self.submissions.values()
            if item.student_id == student_id and item.exercise_id == exercise_id
        ]
        return max(matching, key=lambda item: item.submitted_at, default=None)

    async def create_submission(self, **values: Any) -> FakeSubmission:
        submission = FakeSubmission(
            id=uuid4(),
            submitted_at=BASE_TIME + timedelta(minutes=len(self.submissions)),
            **values,
        )
        self.submissions[submission.id] = submission
        return submission

    async def update_submission(self, submission: FakeSubmission, **changes: Any) -> FakeSubmission:
        for key, value in changes.items():
            setattr(submission, key, value)
        return submission

    async def delete_submission(self, submission: FakeSubmission) -> None:
        del self.submissions[submission.id]

    async def list_submissions(self, student_id: UUID, *, limit: int | None = None) -> list[FakeSubmission]:
        items = sorted(
            (item for item in self.submissions.values() if item.student_id == student_id),
            key=lambda item: item.submitted_at,
            reverse=True,
        )
        return items[:limit] if limit is not None else items

    async def get_statistics(self, student_id: UUID):
        return self.statistics.get(student_id)

    async def create_statistics(self, student_id: UUID) -> FakeStatistics:
        statistics = FakeStatistics(student_id=student_id)
        self.statistics[student_id] = statistics
        return statistics

    async def save_statistics(self, statistics: FakeStatistics, **values: Any) -> FakeStatistics:
        for key, value in values.items():
            setattr(statistics, key, value)
        return statistics


class FakeStudentsRepository:
    def __init__(self, *student_ids: UUID) -> None:
        self.student_ids = set(student_ids)

    async def get_student_by_id(self, student_id: UUID):
        return SimpleNamespace(id=student_id) if student_id in self.student_ids else None


def make_actor(user_id: UUID, role: RoleEnum = RoleEnum.STUDENT) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, role=SimpleNamespace(name=role))


def _setup():
    student_id = uuid4()
    exercise_id = uuid4()
    repository = FakeWritingRepository(exercises={exercise_id: SimpleNamespace(id=exercise_id)})
    service = WritingPracticeService(repository, FakeStudentsRepository(student_id))
    return service, repository, student_id, exercise_id


def test_improvement_rate_compares_newest_window_with_previous_one() -> None:
    assert improvement_rate([]) == 0.0
    assert improvement_rate([90]) == 0.0
    assert improvement_rate([90, 80]) == 0.0
    assert improvement_rate([80] * 5 + [60] * 5) == 20.0
    assert improvement_rate([70, 70, 70, 70, 70, None]) == 70.0
    assert improvement_rate([50] * 5 + [60] * 5 + [90] * 10) == -10.0


@pytest.mark.asyncio
async def test_create_exercise_requires_title_prompt_and_difficulty() -> None:
    service, repository, _, _ = _setup()

    with pytest.raises(ValidationException):
        await service.create_exercise(ExerciseCreate(title="Holiday", prompt="Write"))

    exercise = await service.create_exercise(
        ExerciseCreate(title="Holiday", prompt="Write about it", difficulty_level="beginner"),
    )
    assert exercise.word_limit_min == 50
    assert exercise.word_limit_max == 500
    assert exercise.estimated_time == 15
    assert exercise.evaluation_criteria == {"grammar": 30, "vocabulary": 25, "coherence": 25, "creativity": 20}
    assert repository.created_exercises[0]["tips"] == []


@pytest.mark.asyncio
async def test_submit_reports_which_fields_are_missing() -> None:
    service, _, student_id, _ = _setup()

    with pytest.raises(ValidationException) as exc:
        await service.submit(SubmissionCreate(student_id=student_id, content=""), make_actor(student_id))

    assert exc.value.details == {"student_id": True, "exercise_id": False, "content": False}


@pytest.mark.asyncio
async def test_submit_for_another_student_is_forbidden() -> None:
    service, _, student_id, exercise_id = _setup()

    with pytest.raises(UnauthorizedException):
        await service.submit(
            SubmissionCreate(student_id=student_id, exercise_id=exercise_id, content=ESSAY),
            make_actor(uuid4()),
        )


@pytest.mark.asyncio
async def test_submit_unknown_exercise_is_not_found() -> None:
    service, _, student_id, _ = _setup()

    with pytest.raises(NotFoundException):
        await service.submit(
            SubmissionCreate(student_id=student_id, exercise_id=uuid4(), content=ESSAY),
            make_actor(student_id),
        )


@pytest.mark.asyncio
async def test_submit_grades_and_upserts_latest_submission() -> None:
    service, repository, student_id, exercise_id = _setup()
    actor = make_actor(student_id)

    first, correction = await service.submit(
        SubmissionCreate(student_id=student_id, exercise_id=exercise_id, content="Short text."),
        actor,
    )
    second, _ = await service.submit(
        SubmissionCreate(student_id=student_id, exercise_id=exercise_id, content=ESSAY),
        actor,
    )

    assert correction is not None
    assert second.id == first.id
    assert len(repository.submissions) == 1
    assert second.content == ESSAY
    assert second.is_graded is True
    assert second.word_count == autocorrect.count_words(ESSAY)
    assert second.overall_score == autocorrect.correct(ESSAY).scores.overall

    statistics = repository.statistics[student_id]
    assert statistics.total_submissions == 1
    assert statistics.total_words_written == second.word_count
    assert statistics.average_score == float(second.overall_score)


@pytest.mark.asyncio
async def test_submit_keeps_submission_when_grading_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    service, repository, student_id, exercise_id = _setup()
    failures: list[str] = []

    def _broken(_: str):
        raise RuntimeError("grader crashed")

    monkeypatch.setattr(autocorrect, "correct", _broken)
    monkeypatch.setattr(writing_service_module, "record_side_effect_failure", failures.append)

    submission, correction = await service.submit(
        SubmissionCreate(student_id=student_id, exercise_id=exercise_id, content=ESSAY),
        make_actor(student_id),
    )

    assert correction is None
    assert failures == ["writing_auto_correct"]
    assert submission.id in repository.submissions
    assert submission.is_graded is False
    assert submission.word_count == autocorrect.count_words(ESSAY)
    assert repository.statistics[student_id].total_submissions == 1
    assert repository.statistics[student_id].average_score == 0.0


@pytest.mark.asyncio
async def test_auto_correct_requires_content_and_exercise() -> None:
    service, _, student_id, _ = _setup()

    with pytest.raises(ValidationException) as exc:
        await service.auto_correct(AutoCorrectRequest(content=ESSAY), make_actor(student_id))

    assert exc.value.message == "Content and exercise ID are required"


@pytest.mark.asyncio
async def test_auto_correct_without_submission_only_grades() -> None:
    service, repository, student_id, exercise_id = _setup()

    correction = await service.auto_correct(
        AutoCorrectRequest(exercise_id=exercise_id, content="He go home."),
        make_actor(student_id),
    )

    assert correction.scores.grammar == 90
    assert repository.submissions == {}


@pytest.mark.asyncio
async def test_auto_correct_stores_grading_on_named_submission() -> None:
    service, repository, student_id, exercise_id = _setup()
    submission, _ = await service.submit(
        SubmissionCreate(student_id=student_id, exercise_id=exercise_id, content=ESSAY),
        make_actor(student_id),
    )

    await service.auto_correct(
        AutoCorrectRequest(submission_id=submission.id, exercise_id=exercise_id, content="He go home."),
        make_actor(uuid4(), RoleEnum.ADMIN),
    )

    assert submission.content == "He go home."
    assert submission.grammar_score == 90
    assert submission.auto_correction_data["grammar_errors"][0]["corrected"] == "He gos"


@pytest.mark.asyncio
async def test_list_submissions_requires_student_id() -> None:
    service, _, student_id, _ = _setup()

    with pytest.raises(ValidationException) as exc:
        await service.list_submissions(None, None, make_actor(student_id))

    assert exc.value.message == "Student ID is required"


@pytest.mark.asyncio
async def test_delete_submission_refreshes_statistics() -> None:
    service, repository, student_id, exercise_id = _setup()
    actor = make_actor(student_id)
    submission, _ = await service.submit(
        SubmissionCreate(student_id=student_id, exercise_id=exercise_id, content=ESSAY),
        actor,
    )

    deleted = await service.delete_submission(submission.id, actor)

    assert deleted.exercise_id == exercise_id
    assert repository.submissions == {}
    assert repository.statistics[student_id].total_submissions == 0
    assert repository.statistics[student_id].total_words_written == 0


@pytest.mark.asyncio
async def test_statistics_are_created_on_first_read() -> None:
    service, repository, student_id, _ = _setup()

    statistics = await service.statistics(student_id, make_actor(student_id))

    assert statistics.total_submissions == 0
    assert statistics.improvement_rate == 0.0
    assert statistics.recent_submissions == []
    assert student_id in repository.statistics
