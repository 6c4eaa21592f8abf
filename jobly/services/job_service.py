# job_service.py
from __future__ import annotations

import logging
from typing import Any

from jobly.db.queries import execute, query, query_one
from jobly.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_job_filter, sql_for_partial_update
from jobly.schemas.job import JobCreate, JobFilter


logger = logging.getLogger(__name__)

# Job columns already match their API names apart from the company handle,
# which cannot be changed through an update.
JOB_FIELD_MAP = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

_JOB_COLUMNS = "id, title, salary, equity, company_handle"


def create_job(data: JobCreate) -> dict[str, Any]:
    if not query_one("SELECT handle FROM companies WHERE handle = $1", [data.company_handle]):
        raise BadRequestError(f"No company: {data.company_handle}")

    result = execute(
        "INSERT INTO jobs (title, salary, equity, company_handle) VALUES ($1, $2, $3, $4)",
        [data.title, data.salary, data.equity, data.company_handle],
    )
    logger.info("job.created id=%s company=%s", result.lastrowid, data.company_handle)
    return get_job(int(result.lastrowid))


def find_jobs(criteria: JobFilter | None = None) -> list[dict[str, Any]]:
    where = sql_for_job_filter(criteria or JobFilter())
    return query(f"SELECT {_JOB_COLUMNS} FROM jobs {where.clause} ORDER BY title, id", where.values)


def get_job(job_id: int) -> dict[str, Any]:
    job = query_one(f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
    if not job:
        raise NotFoundError(f"No job: {job_id}")
    return job


def update_job(job_id: int, data: dict[str, Any]) -> dict[str, Any]:
    set_cols = sql_for_partial_update(data, JOB_FIELD_MAP)
    id_idx = f"${len(set_cols.values) + 1}"
    result = execute(f"UPDATE jobs SET {set_cols.clause} WHERE id = {id_idx}", [*set_cols.values, job_id])
    if result.rowcount == 0:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job.updated id=%s fields=%s", job_id, ",".join(data))
    return get_job(job_id)


def remove_job(job_id: int) -> None:
    result = execute("DELETE FROM jobs WHERE id = $1", [job_id])
    if result.rowcount == 0:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job.deleted id=%s", job_id)
