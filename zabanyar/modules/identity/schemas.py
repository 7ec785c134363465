"""Identity schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from zabanyar.core.enums import RoleEnum


class RoleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: RoleEnum


class UserCreate(BaseModel):
    """Account registration request."""

    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    first_name: str = Field(default="", max_length=128)
    last_name: str = Field(default="", max_length=128)
    phone: str | None = Field(default=None, max_length=32)
    role: RoleEnum = RoleEnum.STUDENT


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    refresh_token: str


class ConfirmEmailRequest(BaseModel):
    """Token taken from the `/verify-email?token=` link."""

    token: str


class TokenPair(BaseModel):
    """Bearer pair; the refresh token is single-use."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class UserRead(BaseModel):
    """Account as returned to its owner; the dashboards greet by ``full_name``."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: EmailStr
    first_name: str
    last_name: str
    full_name: str
    phone: str | None
    is_active: bool
    email_confirmed_at: datetime | None
    role: RoleRead
    created_at: datetime
    updated_at: datetime
