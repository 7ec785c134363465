"""Registration wizard API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from zabanyar.core.enums import RoleEnum
from zabanyar.modules.identity.rate_limit import enforce_register_rate_limit
from zabanyar.modules.identity.service import get_current_user, require_roles
from zabanyar.modules.registration.schemas import (
    StepValidationRequest,
    StepValidationResult,
    StudentCompletionResult,
    StudentProfileCompletionForm,
    TeacherCompletionResult,
    TeacherProfileCompletionForm,
    TeacherRegistrationForm,
    TeacherRegistrationResult,
)
from zabanyar.modules.registration.service import (
    STUDENT_COMPLETED_MESSAGE,
    TEACHER_COMPLETED_MESSAGE,
    TEACHER_REGISTERED_MESSAGE,
    RegistrationService,
    get_registration_service,
)
from zabanyar.modules.students.schemas import StudentRead
from zabanyar.modules.teachers.schemas import TeacherRead

router = APIRouter(prefix="/registration", tags=["registration"])


@router.post("/{wizard}/steps/{step}/validate", response_model=StepValidationResult)
async def validate_step(
    payload: StepValidationRequest,
    wizard: str = Path(max_length=64),
    step: int = Path(ge=1),
    service: RegistrationService = Depends(get_registration_service),
) -> StepValidationResult:
    """Check whether the wizard may leave ``step`` with the given fields."""
    return service.validate_step(wizard, step, payload.fields)


@router.post(
    "/teacher",
    response_model=TeacherRegistrationResult,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(enforce_register_rate_limit)],
)
async def register_teacher(
    payload: TeacherRegistrationForm,
    service: RegistrationService = Depends(get_registration_service),
) -> TeacherRegistrationResult:
    """Create the teacher account and its pending profile."""
    teacher, redirect_to = await service.register_teacher(payload)
    return TeacherRegistrationResult(
        teacher=TeacherRead.model_validate(teacher),
        redirect_to=redirect_to,
        message=TEACHER_REGISTERED_MESSAGE,
    )


@router.post("/teacher/complete", response_model=TeacherCompletionResult)
async def complete_teacher_profile(
    payload: TeacherProfileCompletionForm,
    service: RegistrationService = Depends(get_registration_service),
    current_user=Depends(require_roles(RoleEnum.TEACHER)),
) -> TeacherCompletionResult:
    teacher, redirect_to = await service.complete_teacher_profile(payload, current_user)
    return TeacherCompletionResult(
        teacher=TeacherRead.model_validate(teacher),
        redirect_to=redirect_to,
        message=TEACHER_COMPLETED_MESSAGE,
    )


@router.post("/student/complete", response_model=StudentCompletionResult)
async def complete_student_profile(
    payload: StudentProfileCompletionForm,
    service: RegistrationService = Depends(get_registration_service),
    current_user=Depends(get_current_user),
) -> StudentCompletionResult:
    student, redirect_to = await service.complete_student_profile(payload, current_user)
    return StudentCompletionResult(
        student=StudentRead.model_validate(student),
        redirect_to=redirect_to,
        message=STUDENT_COMPLETED_MESSAGE,
    )
