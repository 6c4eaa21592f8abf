# companies.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from jobly.middleware.auth import require_admin
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyFilter,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.schemas.user import DeletedResponse
from jobly.services import company_service


router = APIRouter()


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_company(company_in: CompanyCreate) -> CompanyResponse:
    return CompanyResponse(company=company_service.create_company(company_in))


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: Optional[str] = Query(default=None),
    min_employees: Optional[int] = Query(default=None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(default=None, alias="maxEmployees", ge=0),
) -> CompanyListResponse:
    criteria = CompanyFilter(name=name, min_employees=min_employees, max_employees=max_employees)
    return CompanyListResponse(companies=company_service.find_companies(criteria))


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str) -> CompanyDetailResponse:
    return CompanyDetailResponse(company=company_service.get_company(handle))


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(require_admin)])
def update_company(handle: str, update: CompanyUpdate) -> CompanyResponse:
    data = update.model_dump(exclude_unset=True, by_alias=True)
    return CompanyResponse(company=company_service.update_company(handle, data))


@router.delete("/{handle}", response_model=DeletedResponse, dependencies=[Depends(require_admin)])
def delete_company(handle: str) -> DeletedResponse:
    company_service.remove_company(handle)
    return DeletedResponse(deleted=handle)
