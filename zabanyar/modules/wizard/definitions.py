"""Wizards used by the registration flows."""

from __future__ import annotations

from zabanyar.modules.wizard.engine import StepRule, WizardDefinition

TEACHER_REGISTRATION = WizardDefinition(
    name="teacher_registration",
    steps=(
        StepRule(
            text_fields=(
                "email",
                "password",
                "confirm_password",
                "first_name",
                "last_name",
                "phone",
                "gender",
                "birthdate",
            ),
        ),
        StepRule(
            text_fields=("education", "bio"),
            list_fields=("languages", "class_types"),
            positive_fields=("experience_years",),
        ),
        StepRule(
            text_fields=("location",),
            list_fields=("available_days", "available_hours"),
        ),
        StepRule(list_fields=("teaching_methods",)),
        StepRule(true_fields=("agree_to_terms",)),
    ),
)

TEACHER_PROFILE_COMPLETION = WizardDefinition(
    name="teacher_profile_completion",
    steps=(
        StepRule(text_fields=("phone", "gender", "birthdate")),
        StepRule(
            list_fields=("languages", "levels", "class_types"),
            positive_fields=("experience_years",),
        ),
        StepRule(
            list_fields=("available_days", "available_hours"),
            positive_fields=("max_students_per_class",),
        ),
        StepRule(
            text_fields=("location", "bio"),
            positive_fields=("hourly_rate",),
        ),
    ),
)

WIZARDS: dict[str, WizardDefinition] = {
    "teacher": TEACHER_REGISTRATION,
    "teacher-profile": TEACHER_PROFILE_COMPLETION,
}
