"""Identity business logic layer."""

from __future__ import annotations

import logging
from datetime import timedelta
from uuid import UUID, uuid4

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.config import get_settings
from zabanyar.core.database import get_db_session
from zabanyar.core.enums import RoleEnum
from zabanyar.core.security import (
    ACCESS_TOKEN,
    EMAIL_CONFIRMATION_TOKEN,
    REFRESH_TOKEN,
    create_access_token,
    create_email_confirmation_token,
    create_refresh_token,
    decode_token,
    hash_password,
    oauth2_scheme,
    verify_password,
)
from zabanyar.modules.identity.messages import friendly_auth_error
from zabanyar.modules.identity.models import User
from zabanyar.modules.identity.repository import IdentityRepository
from zabanyar.modules.identity.schemas import LoginRequest, TokenPair, UserCreate
from zabanyar.shared.exceptions import ConflictException, NotFoundException, UnauthorizedException
from zabanyar.shared.utils import utc_now

logger = logging.getLogger(__name__)


class IdentityService:
    """Identity domain service."""

    def __init__(self, repository: IdentityRepository) -> None:
        self.repository = repository

    async def ensure_default_roles(self) -> None:
        """Ensure all default roles exist."""
        for role_name in (RoleEnum.STUDENT, RoleEnum.TEACHER, RoleEnum.ADMIN):
            role = await self.repository.get_role_by_name(role_name)
            if role is None:
                await self.repository.create_role(role_name)

    async def register(self, payload: UserCreate) -> User:
        """Create an account; the email starts unconfirmed when confirmation is required."""
        existing_user = await self.repository.get_user_by_email(payload.email)
        if existing_user is not None:
            raise ConflictException(friendly_auth_error("User already registered"))

        role = await self.repository.get_role_by_name(payload.role)
        if role is None:
            raise NotFoundException("Role not found")

        settings = get_settings()
        confirmed_at = None if settings.require_email_confirmation else utc_now()
        user = await self.repository.create_user(
            email=payload.email,
            password_hash=hash_password(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone=payload.phone,
            role_id=role.id,
            email_confirmed_at=confirmed_at,
        )
        if confirmed_at is None:
            token = create_email_confirmation_token(subject=str(user.id), email=user.email)
            logger.info(
                "Confirmation link for %s: %s/verify-email?token=%s",
                user.email,
                settings.site_url,
                token,
            )
        return user

    async def confirm_email(self, token: str) -> User:
        """Mark the account behind a confirmation token as confirmed."""
        payload = decode_token(token, EMAIL_CONFIRMATION_TOKEN)
        user = await self.repository.get_user_by_id(UUID(payload["sub"]))
        if user is None or user.email != payload.get("email"):
            raise NotFoundException("User not found")
        if user.email_confirmed_at is not None:
            return user
        return await self.repository.mark_email_confirmed(user, utc_now())

    async def login(self, payload: LoginRequest) -> TokenPair:
        """Authenticate user and issue JWT tokens."""
        user = await self.repository.get_user_by_email(payload.email)
        if user is None or not verify_password(payload.password, user.password_hash):
            raise UnauthorizedException("Invalid credentials")

        if not user.is_active:
            raise UnauthorizedException("User is inactive")

        if get_settings().require_email_confirmation and user.email_confirmed_at is None:
            raise UnauthorizedException("Email not confirmed")

        return await self._issue_tokens(user)

    async def refresh_tokens(self, refresh_token_value: str) -> TokenPair:
        """Rotate refresh token and issue new token pair."""
        payload = decode_token(refresh_token_value, REFRESH_TOKEN)
        token_id = payload.get("jti")
        if not token_id:
            raise UnauthorizedException("Invalid refresh token")

        db_token = await self.repository.get_refresh_token_by_id(token_id)
        if db_token is None or db_token.revoked_at is not None or db_token.expires_at <= utc_now():
            raise UnauthorizedException("Refresh token is not valid")

        await self.repository.revoke_refresh_token(token_id, utc_now())

        user = await self.repository.get_user_by_id(UUID(payload["sub"]))
        if user is None or not user.is_active:
            raise UnauthorizedException("User is not valid")

        return await self._issue_tokens(user)

    async def _issue_tokens(self, user: User) -> TokenPair:
        token_id = str(uuid4())
        access_token = create_access_token(subject=str(user.id), role=user.role.name)
        refresh_token = create_refresh_token(subject=str(user.id), token_id=token_id, role=user.role.name)
        expires_at = utc_now() + timedelta(days=get_settings().refresh_token_expire_days)
        await self.repository.create_refresh_token(user.id, token_id, expires_at)
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def get_user_from_access_token(self, token: str) -> User:
        """Resolve user from access token."""
        payload = decode_token(token, ACCESS_TOKEN)
        user = await self.repository.get_user_by_id(UUID(payload["sub"]))
        if user is None:
            raise UnauthorizedException("User not found")
        if not user.is_active:
            raise UnauthorizedException("User is inactive")

        return user


async def get_identity_service(session: AsyncSession = Depends(get_db_session)) -> IdentityService:
    """Dependency to provide identity service."""
    return IdentityService(IdentityRepository(session))


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    service: IdentityService = Depends(get_identity_service),
) -> User:
    """Resolve currently authenticated user from bearer token."""
    return await service.get_user_from_access_token(token)


def require_roles(*roles: RoleEnum):
    """Dependency factory for role-based access."""

    async def _checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role.name not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Operation not permitted for your role",
            )
        return current_user

    return _checker


def is_admin(user) -> bool:
    return user.role.name == RoleEnum.ADMIN


def ensure_self_or_admin(user, owner_id: UUID | None) -> None:
    """Reject access to a row owned by someone else unless the caller is admin."""
    if is_admin(user):
        return
    if owner_id is None or owner_id != user.id:
        raise UnauthorizedException("Operation not permitted for this resource")
