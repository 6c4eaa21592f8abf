# jwt_handler.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum

from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from jobly.config import settings


logger = logging.getLogger(__name__)


class AuthClaims(BaseModel):
    """Decoded payload of a signed token."""

    username: str = Field(min_length=1)
    is_admin: bool = Field(default=False, alias="isAdmin")
    issued_at: datetime | None = Field(default=None, alias="iat")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Role(str, Enum):
    ANONYMOUS = "anonymous"
    USER = "user"
    ADMIN = "admin"


def role_of(identity: AuthClaims | None) -> Role:
    if identity is None:
        return Role.ANONYMOUS
    if identity.is_admin:
        return Role.ADMIN
    return Role.USER


def create_token(username: str, is_admin: bool, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "username": username,
        "isAdmin": bool(is_admin),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> AuthClaims | None:
    """Verify `token` and return its claims, or None if it cannot be trusted.

    Malformed, forged and expired tokens all come back as None; callers treat
    that exactly like a request without credentials.
    """

    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
        return AuthClaims.model_validate(payload)
    except JWTError as exc:
        logger.debug("token rejected: %s", type(exc).__name__)
    except ValidationError:
        logger.debug("token rejected: invalid claims")
    return None
