"""Avatar upload schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AvatarJsonUpload(BaseModel):
    """JSON variant used by the student profile page."""

    model_config = ConfigDict(populate_by_name=True)

    avatar: str | None = None
    user_type: Literal["teacher", "student"] = Field(default="student", alias="userType")
    user_id: str | None = Field(default=None, alias="userId")


class AvatarUpdated(BaseModel):
    success: bool = True
    avatar: str | None
    message: str
