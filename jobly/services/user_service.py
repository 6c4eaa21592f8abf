# user_service.py
from __future__ import annotations

import logging
from typing import Any

from jobly.db.queries import execute, query, query_one
from jobly.errors import BadRequestError, NotFoundError, UnauthorizedError
from jobly.helpers.sql import sql_for_partial_update
from jobly.schemas.user import UserCreate, UserRegister
from jobly.utils.password_hash import hash_password, verify_password


logger = logging.getLogger(__name__)

USER_FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
}

_USER_COLUMNS = "username, first_name, last_name, email, is_admin"


def authenticate(username: str, password: str) -> dict[str, Any]:
    row = query_one(f"SELECT {_USER_COLUMNS}, password FROM users WHERE username = $1", [username])
    if row and verify_password(password, row.pop("password")):
        return row
    raise UnauthorizedError("Invalid username/password")


def register(data: UserRegister | UserCreate) -> dict[str, Any]:
    if query_one("SELECT username FROM users WHERE username = $1", [data.username]):
        raise BadRequestError(f"Duplicate username: {data.username}")

    is_admin = bool(getattr(data, "is_admin", False))
    execute(
        """
        INSERT INTO users (username, password, first_name, last_name, email, is_admin)
        VALUES ($1, $2, $3, $4, $5, $6)
        """,
        [data.username, hash_password(data.password), data.first_name, data.last_name, data.email, is_admin],
    )
    logger.info("user.created username=%s is_admin=%s", data.username, is_admin)
    return get_user_row(data.username)


def find_users() -> list[dict[str, Any]]:
    return query(f"SELECT {_USER_COLUMNS} FROM users ORDER BY username")


def get_user_row(username: str) -> dict[str, Any]:
    user = query_one(f"SELECT {_USER_COLUMNS} FROM users WHERE username = $1", [username])
    if not user:
        raise NotFoundError(f"No user: {username}")
    return user


def get_user(username: str) -> dict[str, Any]:
    """User with the ids of the jobs they applied to."""

    user = get_user_row(username)
    rows = query("SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id", [username])
    user["jobs"] = [row["job_id"] for row in rows]
    return user


def update_user(username: str, data: dict[str, Any]) -> dict[str, Any]:
    """Partial update; a new password is hashed before it is stored."""

    data = dict(data)
    if data.get("password") is not None:
        data["password"] = hash_password(data["password"])

    set_cols = sql_for_partial_update(data, USER_FIELD_MAP)
    username_idx = f"${len(set_cols.values) + 1}"
    result = execute(
        f"UPDATE users SET {set_cols.clause} WHERE username = {username_idx}",
        [*set_cols.values, username],
    )
    if result.rowcount == 0:
        raise NotFoundError(f"No user: {username}")
    logger.info("user.updated username=%s fields=%s", username, ",".join(data))
    return get_user_row(username)


def remove_user(username: str) -> None:
    result = execute("DELETE FROM users WHERE username = $1", [username])
    if result.rowcount == 0:
        raise NotFoundError(f"No user: {username}")
    logger.info("user.deleted username=%s", username)


def apply_to_job(username: str, job_id: int) -> None:
    get_user_row(username)
    if not query_one("SELECT id FROM jobs WHERE id = $1", [job_id]):
        raise NotFoundError(f"No job: {job_id}")
    if query_one("SELECT job_id FROM applications WHERE username = $1 AND job_id = $2", [username, job_id]):
        raise BadRequestError(f"Already applied: {job_id}")

    execute("INSERT INTO applications (username, job_id) VALUES ($1, $2)", [username, job_id])
    logger.info("application.created username=%s job_id=%s", username, job_id)
