# job.py
from typing import Optional

from pydantic import Field, field_validator

from jobly.schemas.base import CamelModel, CamelRequest, reject_null


class JobFilter(CamelModel):
    title: Optional[str] = None
    min_salary: Optional[int] = Field(default=None, ge=0)
    has_equity: Optional[bool] = None


class JobCreate(CamelRequest):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1)


class JobUpdate(CamelRequest):
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def _title_not_null(cls, v: Optional[str]) -> str:
        return reject_null(v, "title")


class JobRead(CamelModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str


class JobResponse(CamelModel):
    job: JobRead


class JobListResponse(CamelModel):
    jobs: list[JobRead]
