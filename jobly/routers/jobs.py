# jobs.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from jobly.middleware.auth import require_admin, require_logged_in
from jobly.schemas.job import JobCreate, JobFilter, JobListResponse, JobResponse, JobUpdate
from jobly.schemas.user import DeletedResponse
from jobly.services import job_service


router = APIRouter()


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(default=None),
    min_salary: Optional[int] = Query(default=None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(default=None, alias="hasEquity"),
) -> JobListResponse:
    """List jobs, optionally filtered.

    - `title`: case-insensitive substring of the job title
    - `minSalary`: salary at least this much; jobs without a salary never
      match, so `minSalary=0` leaves out unsalaried jobs
    - `hasEquity=true`: only jobs offering a non-zero amount of equity
    """

    criteria = JobFilter(title=title, min_salary=min_salary, has_equity=has_equity)
    return JobListResponse(jobs=job_service.find_jobs(criteria))


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_logged_in), Depends(require_admin)],
)
def create_job(job_in: JobCreate) -> JobResponse:
    return JobResponse(job=job_service.create_job(job_in))


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int) -> JobResponse:
    return JobResponse(job=job_service.get_job(job_id))


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_logged_in), Depends(require_admin)],
)
def update_job(job_id: int, update: JobUpdate) -> JobResponse:
    data = update.model_dump(exclude_unset=True, by_alias=True)
    return JobResponse(job=job_service.update_job(job_id, data))


@router.delete(
    "/{job_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_logged_in), Depends(require_admin)],
)
def delete_job(job_id: int) -> DeletedResponse:
    job_service.remove_job(job_id)
    return DeletedResponse(deleted=str(job_id))
