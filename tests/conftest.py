from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Settings are read once at import time, so configure before any jobly import.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["SECRET_KEY"] = "secret-test"
    os.environ["BCRYPT_WORK_FACTOR"] = "4"


@pytest.fixture()
def db() -> Any:
    """Fresh schema with a small, known data set."""

    from jobly.database import create_schema, drop_schema
    from jobly.schemas.company import CompanyCreate
    from jobly.schemas.job import JobCreate
    from jobly.schemas.user import UserCreate
    from jobly.services import company_service, job_service, user_service

    drop_schema()
    create_schema()

    for n in (1, 2, 3):
        company_service.create_company(
            CompanyCreate(
                handle=f"c{n}",
                name=f"C{n}",
                description=f"Desc{n}",
                num_employees=n,
                logo_url=f"http://c{n}.img",
            )
        )

    job_ids = {}
    for title, salary, equity, handle in (
        ("Job 1", 50000, 0.1, "c1"),
        ("Job 2", 60000, 0.0, "c1"),
        ("Job 3", 70000, None, "c2"),
        ("Senior Engineer", 100000, 0.05, "c3"),
    ):
        job = job_service.create_job(JobCreate(title=title, salary=salary, equity=equity, company_handle=handle))
        job_ids[title] = job["id"]

    for username, is_admin in (("u1", False), ("u2", False), ("admin", True)):
        user_service.register(
            UserCreate(
                username=username,
                password=f"password-{username}",
                first_name=f"F{username}",
                last_name=f"L{username}",
                email=f"{username}@example.com",
                is_admin=is_admin,
            )
        )

    yield {"job_ids": job_ids}
    drop_schema()


@pytest.fixture()
def client(db: Any) -> Any:
    from jobly.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def job_ids(db: Any) -> dict[str, int]:
    return db["job_ids"]


def _auth_headers(username: str, is_admin: bool) -> dict[str, str]:
    from jobly.utils.jwt_handler import create_token

    return {"Authorization": f"Bearer {create_token(username, is_admin)}"}


@pytest.fixture()
def u1_headers() -> dict[str, str]:
    return _auth_headers("u1", False)


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return _auth_headers("admin", True)
