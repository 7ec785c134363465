"""Registration flows driven by the step-gated wizards."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.database import CommitCallback, get_commit_callback, get_db_session
from zabanyar.core.enums import RoleEnum, StudentStatusEnum, TeacherStatusEnum
from zabanyar.core.metrics import record_registration
from zabanyar.modules.identity.messages import friendly_auth_error
from zabanyar.modules.identity.repository import IdentityRepository
from zabanyar.modules.identity.schemas import UserCreate
from zabanyar.modules.identity.service import IdentityService
from zabanyar.modules.registration.schemas import (
    StepValidationResult,
    StudentProfileCompletionForm,
    TeacherProfileCompletionForm,
    TeacherRegistrationForm,
)
from zabanyar.modules.students.repository import StudentsRepository
from zabanyar.modules.students.service import StudentsService
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.modules.teachers.service import TeachersService
from zabanyar.modules.wizard.definitions import TEACHER_PROFILE_COMPLETION, TEACHER_REGISTRATION, WIZARDS
from zabanyar.modules.wizard.engine import (
    REQUIRED_FIELDS_NOTICE,
    WizardDefinition,
    WizardState,
    first_incomplete_step,
    missing_fields,
)
from zabanyar.shared.exceptions import AppException, BusinessRuleException, NotFoundException, ValidationException
from zabanyar.shared.utils import none_if_empty

logger = logging.getLogger(__name__)

PASSWORD_MISMATCH_MESSAGE = "رمز عبور و تکرار آن یکسان نیستند"
TEACHER_REGISTERED_MESSAGE = "ثبت‌نام معلم با موفقیت انجام شد! پس از تایید ادمین، می‌توانید وارد شوید."
TEACHER_COMPLETED_MESSAGE = "پروفایل شما تکمیل شد و پس از تایید ادمین فعال می‌شود."
STUDENT_COMPLETED_MESSAGE = "پروفایل شما با موفقیت تکمیل شد."

_OPTIONAL_TEACHER_FIELDS = (
    "national_id",
    "address",
    "levels",
    "available_days",
    "available_hours",
    "hourly_rate",
    "max_students_per_class",
    "teaching_methods",
    "certificates",
    "achievements",
    "education",
    "bio",
    "location",
)


def _ensure_complete(definition: WizardDefinition, fields: dict[str, Any]) -> None:
    step = first_incomplete_step(definition, fields)
    if step is None:
        return
    record_registration(definition.name, "rejected")
    raise BusinessRuleException(
        REQUIRED_FIELDS_NOTICE,
        details={"step": step, "missing_fields": missing_fields(definition, step, fields)},
    )


def _teacher_values(fields: dict[str, Any]) -> dict[str, Any]:
    values = {
        "phone": fields.get("phone"),
        "gender": fields.get("gender"),
        "birthdate": fields.get("birthdate"),
        "languages": fields.get("languages") or [],
        "class_types": fields.get("class_types") or [],
        "experience_years": fields.get("experience_years") or 0,
    }
    for name in _OPTIONAL_TEACHER_FIELDS:
        values[name] = none_if_empty(fields.get(name))
    return values


def verify_email_route(email: str) -> str:
    return f"/verify-email?email={quote(email, safe='')}"


class RegistrationService:
    """Terminal actions of the registration wizards.

    Teacher sign-up writes twice: the account is committed first and the
    profile row second. A failing profile insert does not undo the account.
    """

    def __init__(
        self,
        identity_service: IdentityService,
        teachers_service: TeachersService,
        students_service: StudentsService,
        commit: CommitCallback,
    ) -> None:
        self.identity_service = identity_service
        self.teachers_service = teachers_service
        self.students_service = students_service
        self.commit = commit

    def validate_step(self, wizard: str, step: int, fields: dict[str, Any]) -> StepValidationResult:
        definition = WIZARDS.get(wizard)
        if definition is None:
            raise NotFoundException(f"Unknown wizard: {wizard}")
        if not 1 <= step <= definition.total_steps:
            raise ValidationException(f"Step must be between 1 and {definition.total_steps}")

        state = WizardState(definition=definition, current_step=step, fields=fields)
        next_state, notice = state.advance()
        return StepValidationResult(
            wizard=wizard,
            step=step,
            total_steps=definition.total_steps,
            can_advance=notice is None,
            missing_fields=missing_fields(definition, step, fields),
            next_step=next_state.current_step,
            notice=notice,
        )

    async def register_teacher(self, form: TeacherRegistrationForm):
        fields = form.model_dump()
        _ensure_complete(TEACHER_REGISTRATION, fields)
        if form.password != form.confirm_password:
            record_registration(TEACHER_REGISTRATION.name, "rejected")
            raise BusinessRuleException(PASSWORD_MISMATCH_MESSAGE)

        try:
            account = UserCreate(
                email=form.email,
                password=form.password,
                first_name=form.first_name,
                last_name=form.last_name,
                phone=form.phone,
                role=RoleEnum.TEACHER,
            )
        except ValidationError as exc:
            record_registration(TEACHER_REGISTRATION.name, "rejected")
            failed_fields = {error["loc"][0] for error in exc.errors() if error.get("loc")}
            if "password" in failed_fields:
                reason = "Password should be at least 6 characters"
            else:
                reason = "Invalid email"
            raise BusinessRuleException(friendly_auth_error(reason)) from exc

        try:
            user = await self.identity_service.register(account)
        except AppException:
            record_registration(TEACHER_REGISTRATION.name, "failed")
            raise
        await self.commit()

        try:
            teacher = await self.teachers_service.create_teacher(
                id=user.id,
                email=user.email,
                first_name=form.first_name,
                last_name=form.last_name,
                status=TeacherStatusEnum.PENDING,
                available=True,
                **_teacher_values(fields),
            )
        except Exception as exc:
            logger.exception("Teacher profile insert failed for committed account %s", user.id)
            record_registration(TEACHER_REGISTRATION.name, "failed")
            raise BusinessRuleException(
                friendly_auth_error(str(exc)),
                details={"account_created": True, "user_id": str(user.id)},
            ) from exc

        record_registration(TEACHER_REGISTRATION.name, "success")
        if user.email_confirmed_at is None:
            redirect_to = verify_email_route(user.email)
        else:
            redirect_to = "/complete-profile?type=teacher"
        return teacher, redirect_to

    async def complete_teacher_profile(self, form: TeacherProfileCompletionForm, actor):
        fields = form.model_dump()
        _ensure_complete(TEACHER_PROFILE_COMPLETION, fields)

        values = _teacher_values(fields)
        existing = await self.teachers_service.repository.get_teacher_by_id(actor.id)
        if existing is None:
            teacher = await self.teachers_service.create_teacher(
                id=actor.id,
                email=actor.email,
                first_name=actor.first_name,
                last_name=actor.last_name,
                **values,
            )
        else:
            teacher = await self.teachers_service.repository.update_teacher(existing, **values)
        record_registration(TEACHER_PROFILE_COMPLETION.name, "success")
        return teacher, "/login"

    async def complete_student_profile(self, form: StudentProfileCompletionForm, actor):
        values = {name: none_if_empty(value) for name, value in form.model_dump().items()}
        values["preferred_languages"] = form.preferred_languages
        values["availability"] = form.availability

        existing = await self.students_service.repository.get_student_by_id(actor.id)
        if existing is None:
            student = await self.students_service.create_student(
                id=actor.id,
                email=actor.email,
                first_name=actor.first_name,
                last_name=actor.last_name,
                status=StudentStatusEnum.ACTIVE,
                **values,
            )
        else:
            student = await self.students_service.repository.update_student(existing, **values)
        record_registration("student_profile_completion", "success")
        return student, "/dashboard"


async def get_registration_service(
    session: AsyncSession = Depends(get_db_session),
    commit: CommitCallback = Depends(get_commit_callback),
) -> RegistrationService:
    """Dependency provider for registration service."""
    return RegistrationService(
        identity_service=IdentityService(IdentityRepository(session)),
        teachers_service=TeachersService(TeachersRepository(session)),
        students_service=StudentsService(StudentsRepository(session)),
        commit=commit,
    )
