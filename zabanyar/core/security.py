"""Password hashing and the three JWT kinds issued by the API."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from zabanyar.core.config import get_settings
from zabanyar.shared.exceptions import UnauthorizedException

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"
EMAIL_CONFIRMATION_TOKEN = "email_confirmation"

EMAIL_CONFIRMATION_LIFETIME = timedelta(days=1)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
settings = get_settings()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/identity/auth/login")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def _encode(subject: str, token_type: str, lifetime: timedelta, **claims: Any) -> str:
    payload: dict[str, Any] = {
        **claims,
        "sub": subject,
        "type": token_type,
        "exp": datetime.now(UTC) + lifetime,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(subject: str, **claims: Any) -> str:
    lifetime = timedelta(minutes=settings.access_token_expire_minutes)
    return _encode(subject, ACCESS_TOKEN, lifetime, **claims)


def create_refresh_token(subject: str, token_id: str, **claims: Any) -> str:
    """Refresh token; ``jti`` ties it to a row that rotation revokes."""
    lifetime = timedelta(days=settings.refresh_token_expire_days)
    return _encode(subject, REFRESH_TOKEN, lifetime, jti=token_id, **claims)


def create_email_confirmation_token(subject: str, email: str) -> str:
    """Token embedded in the verify-email link; carries the address it confirms."""
    return _encode(subject, EMAIL_CONFIRMATION_TOKEN, EMAIL_CONFIRMATION_LIFETIME, email=email)


def decode_token(token: str, expected_type: str) -> dict[str, Any]:
    """Verify signature and expiry, then require the given ``type`` and a subject."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise UnauthorizedException("Invalid token") from exc

    if payload.get("type") != expected_type:
        raise UnauthorizedException(f"Expected a {expected_type} token")
    if not payload.get("sub"):
        raise UnauthorizedException("Token subject is missing")
    return payload
