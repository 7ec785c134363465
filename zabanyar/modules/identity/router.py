"""Identity API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from zabanyar.modules.identity.rate_limit import (
    enforce_login_rate_limit,
    enforce_refresh_rate_limit,
    enforce_register_rate_limit,
)
from zabanyar.modules.identity.schemas import (
    ConfirmEmailRequest,
    LoginRequest,
    RefreshRequest,
    TokenPair,
    UserCreate,
    UserRead,
)
from zabanyar.modules.identity.service import IdentityService, get_current_user, get_identity_service

router = APIRouter(prefix="/identity", tags=["identity"])


@router.post(
    "/auth/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(enforce_register_rate_limit)],
)
async def register(
    payload: UserCreate,
    service: IdentityService = Depends(get_identity_service),
) -> UserRead:
    """Register a new account."""
    user = await service.register(payload)
    return UserRead.model_validate(user)


@router.post("/auth/login", response_model=TokenPair, dependencies=[Depends(enforce_login_rate_limit)])
async def login(
    payload: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
) -> TokenPair:
    """Sign in by email/password and return JWT token pair."""
    return await service.login(payload)


@router.post("/auth/refresh", response_model=TokenPair, dependencies=[Depends(enforce_refresh_rate_limit)])
async def refresh_tokens(
    payload: RefreshRequest,
    service: IdentityService = Depends(get_identity_service),
) -> TokenPair:
    """Rotate refresh token and issue new token pair."""
    return await service.refresh_tokens(payload.refresh_token)


@router.post("/auth/confirm-email", response_model=UserRead)
async def confirm_email(
    payload: ConfirmEmailRequest,
    service: IdentityService = Depends(get_identity_service),
) -> UserRead:
    user = await service.confirm_email(payload.token)
    return UserRead.model_validate(user)


@router.get("/users/me", response_model=UserRead)
async def get_me(current_user=Depends(get_current_user)) -> UserRead:
    """Return profile of authenticated user."""
    return UserRead.model_validate(current_user)
