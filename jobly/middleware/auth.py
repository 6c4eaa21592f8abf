"""Authentication middleware and authorization gates.

Authentication is advisory: `AuthenticateJWTMiddleware` records who the caller
is (or None) on ``request.state.identity`` and never rejects a request.
Authorization is enforced per route by the `require_*` dependencies, each of
which checks for an identity on its own and raises `UnauthorizedError`.
"""

from __future__ import annotations

import re

from fastapi import Depends, Request
from starlette.middleware.base import BaseHTTPMiddleware

from jobly.errors import UnauthorizedError
from jobly.utils.jwt_handler import AuthClaims, Role, decode_token, role_of


_BEARER_RE = re.compile(r"^bearer ", re.IGNORECASE)


def identity_from_header(authorization: str | None, secret: str, algorithm: str = "HS256") -> AuthClaims | None:
    if not authorization or not authorization.strip():
        return None
    token = _BEARER_RE.sub("", authorization.strip()).strip()
    if not token:
        return None
    return decode_token(token, secret, algorithm)


class AuthenticateJWTMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, secret: str, algorithm: str = "HS256") -> None:
        super().__init__(app)
        self._secret = secret
        self._algorithm = algorithm

    async def dispatch(self, request: Request, call_next):
        request.state.identity = identity_from_header(
            request.headers.get("authorization"), self._secret, self._algorithm
        )
        return await call_next(request)


def is_logged_in(identity: AuthClaims | None) -> bool:
    return role_of(identity) is not Role.ANONYMOUS


def is_admin(identity: AuthClaims | None) -> bool:
    return role_of(identity) is Role.ADMIN


def is_self_or_admin(identity: AuthClaims | None, username: str) -> bool:
    role = role_of(identity)
    if role is Role.ADMIN:
        return True
    if role is Role.USER:
        return identity.username == username
    return False


def get_identity(request: Request) -> AuthClaims | None:
    return getattr(request.state, "identity", None)


def require_logged_in(identity: AuthClaims | None = Depends(get_identity)) -> AuthClaims:
    if not is_logged_in(identity):
        raise UnauthorizedError()
    return identity


def require_admin(identity: AuthClaims | None = Depends(get_identity)) -> AuthClaims:
    if not is_admin(identity):
        raise UnauthorizedError("Must be an admin")
    return identity


def require_self_or_admin(username: str, identity: AuthClaims | None = Depends(get_identity)) -> AuthClaims:
    """`username` is the `{username}` path parameter of the guarded route."""

    if not is_self_or_admin(identity, username):
        raise UnauthorizedError("Must be the user or an admin")
    return identity
