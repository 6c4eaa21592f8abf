# company_service.py
from __future__ import annotations

import logging
from typing import Any

from jobly.db.queries import execute, query, query_one
from jobly.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_company_filter, sql_for_partial_update
from jobly.schemas.company import CompanyCreate, CompanyFilter


logger = logging.getLogger(__name__)

COMPANY_FIELD_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"


def create_company(data: CompanyCreate) -> dict[str, Any]:
    if query_one("SELECT handle FROM companies WHERE handle = $1", [data.handle]):
        raise BadRequestError(f"Duplicate company: {data.handle}")

    execute(
        """
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        """,
        [data.handle, data.name, data.description, data.num_employees, data.logo_url],
    )
    logger.info("company.created handle=%s", data.handle)
    return get_company_row(data.handle)


def find_companies(criteria: CompanyFilter | None = None) -> list[dict[str, Any]]:
    where = sql_for_company_filter(criteria or CompanyFilter())
    return query(f"SELECT {_COMPANY_COLUMNS} FROM companies {where.clause} ORDER BY name", where.values)


def get_company_row(handle: str) -> dict[str, Any]:
    company = query_one(f"SELECT {_COMPANY_COLUMNS} FROM companies WHERE handle = $1", [handle])
    if not company:
        raise NotFoundError(f"No company: {handle}")
    return company


def get_company(handle: str) -> dict[str, Any]:
    """Company with the jobs it has posted."""

    company = get_company_row(handle)
    company["jobs"] = query(
        "SELECT id, title, salary, equity FROM jobs WHERE company_handle = $1 ORDER BY id",
        [handle],
    )
    return company


def update_company(handle: str, data: dict[str, Any]) -> dict[str, Any]:
    """Partial update; `data` uses the camelCase field names of the API."""

    set_cols = sql_for_partial_update(data, COMPANY_FIELD_MAP)
    handle_idx = f"${len(set_cols.values) + 1}"
    result = execute(
        f"UPDATE companies SET {set_cols.clause} WHERE handle = {handle_idx}",
        [*set_cols.values, handle],
    )
    if result.rowcount == 0:
        raise NotFoundError(f"No company: {handle}")
    logger.info("company.updated handle=%s fields=%s", handle, ",".join(data))
    return get_company_row(handle)


def remove_company(handle: str) -> None:
    result = execute("DELETE FROM companies WHERE handle = $1", [handle])
    if result.rowcount == 0:
        raise NotFoundError(f"No company: {handle}")
    logger.info("company.deleted handle=%s", handle)
