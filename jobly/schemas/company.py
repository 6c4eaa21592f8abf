# company.py
from typing import Optional

from pydantic import Field, field_validator

from jobly.schemas.base import CamelModel, CamelRequest, reject_null


class CompanyFilter(CamelModel):
    name: Optional[str] = None
    min_employees: Optional[int] = Field(default=None, ge=0)
    max_employees: Optional[int] = Field(default=None, ge=0)


class CompanyCreate(CamelRequest):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(CamelRequest):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v: Optional[str]) -> str:
        return reject_null(v, "name")


class CompanyRead(CamelModel):
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(CamelModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class CompanyDetail(CompanyRead):
    jobs: list[CompanyJob] = Field(default_factory=list)


class CompanyResponse(CamelModel):
    company: CompanyRead


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyRead]
