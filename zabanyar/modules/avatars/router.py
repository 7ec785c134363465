"""Avatar upload API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from zabanyar.modules.avatars.schemas import AvatarJsonUpload, AvatarUpdated
from zabanyar.modules.avatars.service import AVATAR_UPDATED_MESSAGE, AvatarService, get_avatar_service
from zabanyar.modules.identity.service import get_current_user
from zabanyar.shared.exceptions import ValidationException

router = APIRouter(tags=["avatars"])


@router.post("/upload-avatar", response_model=AvatarUpdated)
async def upload_avatar(
    request: Request,
    service: AvatarService = Depends(get_avatar_service),
    current_user=Depends(get_current_user),
) -> AvatarUpdated:
    """Accept either a multipart file (teachers) or a JSON data URL.

    Multipart fields: ``avatar`` (file, empty to remove) and ``teacherId``.
    JSON fields: ``avatar`` (data URL), ``userType`` and ``userId``.
    """
    if "application/json" in request.headers.get("content-type", ""):
        try:
            payload = AvatarJsonUpload.model_validate(await request.json())
        except (ValueError, ValidationError) as exc:
            raise ValidationException("Invalid JSON body") from exc
        avatar = await service.upload_data_url(
            user_type=payload.user_type,
            user_id=payload.user_id,
            avatar=payload.avatar,
            actor=current_user,
        )
    else:
        form = await request.form()
        upload = form.get("avatar")
        teacher_id = form.get("teacherId")
        content = await upload.read() if isinstance(upload, UploadFile) else None
        avatar = await service.upload_file(
            teacher_id=teacher_id if isinstance(teacher_id, str) else None,
            content=content,
            content_type=upload.content_type if isinstance(upload, UploadFile) else None,
            actor=current_user,
        )
    return AvatarUpdated(avatar=avatar, message=AVATAR_UPDATED_MESSAGE)
