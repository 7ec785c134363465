from __future__ import annotations

import pytest

from zabanyar.modules.wizard.definitions import TEACHER_PROFILE_COMPLETION, TEACHER_REGISTRATION, WIZARDS
from zabanyar.modules.wizard.engine import (
    REQUIRED_FIELDS_NOTICE,
    StepRule,
    WizardDefinition,
    WizardState,
    can_advance,
    first_incomplete_step,
    missing_fields,
)

COMPLETE_TEACHER_FORM = {
    "email": "sara@example.com",
    "password": "secret1",
    "confirm_password": "secret1",
    "first_name": "Sara",
    "last_name": "Ahmadi",
    "phone": "09120000000",
    "gender": "female",
    "birthdate": "1990-01-01",
    "languages": ["english"],
    "class_types": ["online"],
    "experience_years": 3,
    "education": "MA TEFL",
    "bio": "Conversation classes",
    "available_days": ["saturday"],
    "available_hours": ["18:00"],
    "location": "Tehran",
    "teaching_methods": ["communicative"],
    "agree_to_terms": True,
}


def test_registration_wizards_are_exposed_by_url_name() -> None:
    assert WIZARDS["teacher"] is TEACHER_REGISTRATION
    assert WIZARDS["teacher-profile"] is TEACHER_PROFILE_COMPLETION
    assert TEACHER_REGISTRATION.total_steps == 5
    assert TEACHER_PROFILE_COMPLETION.total_steps == 4


def test_complete_teacher_form_passes_every_step() -> None:
    assert first_incomplete_step(TEACHER_REGISTRATION, COMPLETE_TEACHER_FORM) is None


def test_second_step_requires_positive_experience() -> None:
    fields = {**COMPLETE_TEACHER_FORM, "experience_years": 0}

    assert missing_fields(TEACHER_REGISTRATION, 2, fields) == ["experience_years"]
    assert first_incomplete_step(TEACHER_REGISTRATION, fields) == 2


def test_empty_arrays_and_blank_strings_block_advancing() -> None:
    fields = {**COMPLETE_TEACHER_FORM, "available_days": [], "location": ""}

    assert missing_fields(TEACHER_REGISTRATION, 3, fields) == ["location", "available_days"]


@pytest.mark.parametrize("value", [False, None, "yes", 1])
def test_terms_must_be_literally_true(value: object) -> None:
    fields = {**COMPLETE_TEACHER_FORM, "agree_to_terms": value}

    assert not can_advance(TEACHER_REGISTRATION, 5, fields)


def test_booleans_do_not_count_as_positive_numbers() -> None:
    rule = StepRule(positive_fields=("hourly_rate",))

    assert rule.missing({"hourly_rate": True}) == ["hourly_rate"]
    assert rule.missing({"hourly_rate": 0.5}) == []


@pytest.mark.parametrize(
    ("value", "blocks"),
    [
        ("5", False),
        (" 2.5 ", False),
        ("0", True),
        ("abc", True),
        ([], True),
        ({"years": 3}, True),
    ],
)
def test_experience_typed_as_text_is_judged_by_its_number(value, blocks: bool) -> None:
    fields = {**COMPLETE_TEACHER_FORM, "experience_years": value}

    assert (missing_fields(TEACHER_REGISTRATION, 2, fields) == ["experience_years"]) is blocks
    assert can_advance(TEACHER_REGISTRATION, 2, fields) is not blocks


def test_unknown_step_is_rejected() -> None:
    with pytest.raises(ValueError):
        missing_fields(TEACHER_PROFILE_COMPLETION, 5, {})


def test_advance_refuses_incomplete_step_without_changing_state() -> None:
    state = WizardState(TEACHER_REGISTRATION).update(email="sara@example.com")

    new_state, notice = state.advance()

    assert new_state is state
    assert notice == REQUIRED_FIELDS_NOTICE


def test_advance_and_go_back() -> None:
    state = WizardState(TEACHER_REGISTRATION, fields=COMPLETE_TEACHER_FORM)

    second, notice = state.advance()
    assert notice is None
    assert second.current_step == 2
    assert second.prev_step().current_step == 1
    assert state.prev_step().current_step == 1


def test_last_step_stays_put_when_advanced() -> None:
    definition = WizardDefinition(name="single", steps=(StepRule(),))
    state = WizardState(definition)

    advanced, notice = state.advance()

    assert notice is None
    assert advanced.is_last_step
    assert advanced.current_step == 1


def test_state_fields_are_read_only() -> None:
    state = WizardState(TEACHER_PROFILE_COMPLETION, fields={"phone": "0912"})

    with pytest.raises(TypeError):
        state.fields["phone"] = "changed"  # type: ignore[index]
    assert state.update(phone="0935").fields["phone"] == "0935"
    assert state.fields["phone"] == "0912"
