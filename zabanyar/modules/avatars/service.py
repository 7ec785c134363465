"""Profile picture uploads stored inline as data URLs."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Literal
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.config import get_settings
from zabanyar.core.database import get_db_session
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.modules.students.repository import StudentsRepository
from zabanyar.modules.students.service import StudentsService
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.modules.teachers.service import TeachersService
from zabanyar.shared.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)

UserType = Literal["teacher", "student"]

MISSING_USER_ID_MESSAGE = "شناسه کاربر ارسال نشده است"
FILE_TOO_LARGE_MESSAGE = "حجم فایل نباید بیشتر از 5 مگابایت باشد"
INVALID_TYPE_MESSAGE = "فقط فایل‌های تصویری (JPG, PNG, WebP) مجاز هستند"
MISSING_FILE_MESSAGE = "فایل تصویر ارسال نشده است"
AVATAR_UPDATED_MESSAGE = "تصویر پروفایل با موفقیت به‌روزرسانی شد"
OWNER_LABELS = {"teacher": "معلم", "student": "دانش‌آموز"}

_DATA_URL_RE = re.compile(r"^data:(?P<content_type>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


def owner_not_found_message(user_type: UserType) -> str:
    return f"{OWNER_LABELS[user_type]} مورد نظر یافت نشد"


def parse_user_id(raw: str | UUID | None) -> UUID:
    if raw is None or raw == "":
        raise ValidationException(MISSING_USER_ID_MESSAGE)
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError as exc:
        raise ValidationException(MISSING_USER_ID_MESSAGE) from exc


def _check_image(size: int, content_type: str | None) -> None:
    settings = get_settings()
    if size > settings.avatar_max_bytes:
        raise ValidationException(FILE_TOO_LARGE_MESSAGE)
    if (content_type or "").lower() not in settings.avatar_allowed_content_types:
        raise ValidationException(INVALID_TYPE_MESSAGE)


def encode_upload(content: bytes, content_type: str | None) -> str | None:
    """Turn uploaded bytes into a data URL; an empty upload means "remove"."""
    if not content:
        return None
    _check_image(len(content), content_type)
    return f"data:{content_type};base64,{base64.b64encode(content).decode('ascii')}"


def validate_data_url(value: str) -> str:
    match = _DATA_URL_RE.match(value.strip())
    if match is None:
        raise ValidationException(INVALID_TYPE_MESSAGE)
    try:
        decoded = base64.b64decode(match["payload"], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationException(INVALID_TYPE_MESSAGE) from exc
    _check_image(len(decoded), match["content_type"])
    return value.strip()


class AvatarService:
    """Writes avatars onto teacher or student rows."""

    def __init__(self, teachers_service: TeachersService, students_service: StudentsService) -> None:
        self.teachers_service = teachers_service
        self.students_service = students_service

    async def upload_file(
        self,
        *,
        teacher_id: str | None,
        content: bytes | None,
        content_type: str | None,
        actor,
    ) -> str | None:
        """Multipart flow of the teacher profile; always targets a teacher."""
        user_id = parse_user_id(teacher_id)
        if content is None:
            raise ValidationException(MISSING_FILE_MESSAGE)
        return await self._save("teacher", user_id, encode_upload(content, content_type), actor)

    async def upload_data_url(
        self,
        *,
        user_type: UserType,
        user_id: str | None,
        avatar: str | None,
        actor,
    ) -> str | None:
        owner_id = parse_user_id(user_id)
        if not avatar:
            raise ValidationException(MISSING_FILE_MESSAGE)
        return await self._save(user_type, owner_id, validate_data_url(avatar), actor)

    async def _save(self, user_type: UserType, user_id: UUID, data_url: str | None, actor) -> str | None:
        ensure_self_or_admin(actor, user_id)
        if user_type == "student":
            owner = await self.students_service.set_avatar(user_id, data_url)
        else:
            owner = await self.teachers_service.set_avatar(user_id, data_url)
        if owner is None:
            raise NotFoundException(owner_not_found_message(user_type))

        logger.info("Avatar %s for %s %s", "cleared" if data_url is None else "updated", user_type, user_id)
        return owner.avatar


async def get_avatar_service(session: AsyncSession = Depends(get_db_session)) -> AvatarService:
    """Dependency provider for avatar service."""
    return AvatarService(
        TeachersService(TeachersRepository(session)),
        StudentsService(StudentsRepository(session)),
    )
