from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any
from uuid import UUID, uuid4

import pytest

import zabanyar.modules.listening_practice.service as listening_service_module
from zabanyar.core.enums import RoleEnum
from zabanyar.modules.listening_practice.schemas import ExerciseCreate, QuestionCreate, SubmissionCreate
from zabanyar.modules.listening_practice.service import ListeningPracticeService, grade_answers
from zabanyar.shared.exceptions import (
    BusinessRuleException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)


def make_question(correct_answer: str, points: int | None = 10) -> SimpleNamespace:
    return SimpleNamespace(id=uuid4(), correct_answer=correct_answer, points=points)


@dataclass
class FakeListeningRepository:
    exercises: dict[UUID, SimpleNamespace] = field(default_factory=dict)
    questions: dict[UUID, list[SimpleNamespace]] = field(default_factory=dict)
    submissions: list[SimpleNamespace] = field(default_factory=list)
    answers: dict[UUID, list[dict[str, Any]]] = field(default_factory=dict)
    fail_answers: bool = False

    @asynccontextmanager
    async def savepoint(self):
        yield

    async def create_exercise(self, questions: list[dict[str, Any]], **values: Any):
        exercise = SimpleNamespace(id=uuid4(), **values)
        self.exercises[exercise.id] = exercise
        self.questions[exercise.id] = [SimpleNamespace(id=uuid4(), **item) for item in questions]
        return exercise

    async def get_exercise(self, exercise_id: UUID):
        return self.exercises.get(exercise_id)

    async def list_questions(self, exercise_id: UUID):
        return list(self.questions.get(exercise_id, []))

    async def create_submission(self, **values: Any):
        submission = SimpleNamespace(id=uuid4(), **values)
        self.submissions.append(submission)
        return submission

    async def add_answers(self, submission_id: UUID, answers: list[dict[str, Any]]) -> None:
        if self.fail_answers:
            raise RuntimeError("answers table unavailable")
        self.answers[submission_id] = answers

    async def list_submissions(self, student_id: UUID, *, limit: int):
        return [item for item in self.submissions if item.student_id == student_id][:limit]


class FakeStudentsRepository:
    def __init__(self, *student_ids: UUID) -> None:
        self.student_ids = set(student_ids)

    async def get_student_by_id(self, student_id: UUID):
        return SimpleNamespace(id=student_id) if student_id in self.student_ids else None


def make_actor(user_id: UUID, role: RoleEnum = RoleEnum.STUDENT) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, role=SimpleNamespace(name=role))


def _setup(*questions: SimpleNamespace, fail_answers: bool = False):
    student_id = uuid4()
    exercise_id = uuid4()
    repository = FakeListeningRepository(
        exercises={exercise_id: SimpleNamespace(id=exercise_id)},
        questions={exercise_id: list(questions)},
        fail_answers=fail_answers,
    )
    service = ListeningPracticeService(repository, FakeStudentsRepository(student_id))
    return service, repository, student_id, exercise_id


def test_grading_ignores_case_and_surrounding_spaces() -> None:
    first, second, third = make_question("Paris"), make_question("b"), make_question("42")

    grade = grade_answers([first, second, third], {first.id: "  paris ", second.id: "c"})

    assert [item.is_correct for item in grade.answers] == [True, False, False]
    assert [item.points_earned for item in grade.answers] == [10, 0, 0]
    assert grade.answers[2].student_answer == ""
    assert grade.correct_answers == 1
    assert grade.total_questions == 3
    assert grade.score == 33


def test_score_is_share_of_points_rounded_half_up() -> None:
    heavy, light = make_question("yes", points=7), make_question("no", points=None)

    assert grade_answers([heavy, light], {light.id: "no"}).score == 59
    assert grade_answers([heavy, light], {heavy.id: "yes", light.id: "NO"}).score == 100

    halves = [make_question("a", points=1) for _ in range(8)]
    answered = {question.id: "a" for question in halves[:1]}
    assert grade_answers(halves, answered).score == 13


def test_exercise_without_questions_cannot_be_scored() -> None:
    with pytest.raises(BusinessRuleException):
        grade_answers([], {})


@pytest.mark.asyncio
async def test_create_exercise_requires_audio_and_questions() -> None:
    service, repository, _, _ = _setup()

    with pytest.raises(ValidationException):
        await service.create_exercise(
            ExerciseCreate(title="At the airport", audio_url="https://cdn/airport.mp3", difficulty_level="beginner"),
        )

    exercise = await service.create_exercise(
        ExerciseCreate(
            title="At the airport",
            audio_url="https://cdn/airport.mp3",
            difficulty_level="beginner",
            questions=[
                QuestionCreate(question_text="Where is the gate?", correct_answer="B12", options=["A3", "B12"]),
                QuestionCreate(question_text="Departure time?", correct_answer="9:30", points=20),
            ],
        ),
    )

    stored = repository.questions[exercise.id]
    assert [item.order_index for item in stored] == [0, 1]
    assert [item.points for item in stored] == [10, 20]
    assert stored[0].options == ["A3", "B12"]


@pytest.mark.asyncio
async def test_submit_reports_which_fields_are_missing() -> None:
    service, _, student_id, _ = _setup(make_question("a"))

    with pytest.raises(ValidationException) as exc:
        await service.submit(SubmissionCreate(student_id=student_id), make_actor(student_id))

    assert exc.value.details == {"student_id": True, "exercise_id": False, "answers": False}


@pytest.mark.asyncio
async def test_submit_checks_owner_and_exercise() -> None:
    service, _, student_id, exercise_id = _setup(make_question("a"))

    with pytest.raises(UnauthorizedException):
        await service.submit(
            SubmissionCreate(student_id=student_id, exercise_id=exercise_id, answers={}),
            make_actor(uuid4()),
        )
    with pytest.raises(NotFoundException):
        await service.submit(
            SubmissionCreate(student_id=student_id, exercise_id=uuid4(), answers={}),
            make_actor(student_id),
        )


@pytest.mark.asyncio
async def test_submit_stores_scored_attempt_and_answer_rows() -> None:
    first, second = make_question("library"), make_question("Tuesday")
    service, repository, student_id, exercise_id = _setup(first, second)

    submission, grade = await service.submit(
        SubmissionCreate(
            student_id=student_id,
            exercise_id=exercise_id,
            answers={first.id: "Library", second.id: "monday"},
            time_taken=95,
        ),
        make_actor(student_id),
    )

    assert grade.score == 50
    assert submission.score == 50
    assert submission.correct_answers == 1
    assert submission.total_questions == 2
    assert submission.listening_attempts == 1
    assert submission.time_taken == 95
    assert submission.is_completed is True
    rows = repository.answers[submission.id]
    assert [row["question_id"] for row in rows] == [first.id, second.id]
    assert rows[1] == {"question_id": second.id, "student_answer": "monday", "is_correct": False, "points_earned": 0}


@pytest.mark.asyncio
async def test_answer_rows_failure_keeps_submission(monkeypatch: pytest.MonkeyPatch) -> None:
    failures: list[str] = []
    monkeypatch.setattr(listening_service_module, "record_side_effect_failure", failures.append)
    question = make_question("a")
    service, repository, student_id, exercise_id = _setup(question, fail_answers=True)

    submission, grade = await service.submit(
        SubmissionCreate(student_id=student_id, exercise_id=exercise_id, answers={question.id: "a"}),
        make_actor(uuid4(), RoleEnum.ADMIN),
    )

    assert grade.score == 100
    assert repository.submissions == [submission]
    assert repository.answers == {}
    assert failures == ["listening_answers"]


@pytest.mark.asyncio
async def test_list_submissions_needs_student_and_owner() -> None:
    service, _, student_id, _ = _setup()

    with pytest.raises(ValidationException):
        await service.list_submissions(None, 10, make_actor(student_id))
    with pytest.raises(UnauthorizedException):
        await service.list_submissions(student_id, 10, make_actor(uuid4()))
    assert await service.list_submissions(student_id, 10, make_actor(student_id)) == []
