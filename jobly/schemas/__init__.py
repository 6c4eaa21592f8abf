# __init__.py
from jobly.schemas.company import (
	CompanyCreate,
	CompanyDetail,
	CompanyDetailResponse,
	CompanyFilter,
	CompanyListResponse,
	CompanyRead,
	CompanyResponse,
	CompanyUpdate,
)
from jobly.schemas.job import JobCreate, JobFilter, JobListResponse, JobRead, JobResponse, JobUpdate
from jobly.schemas.user import (
	AppliedResponse,
	DeletedResponse,
	TokenResponse,
	UserCreate,
	UserCreatedResponse,
	UserDetail,
	UserDetailResponse,
	UserListResponse,
	UserLogin,
	UserRead,
	UserRegister,
	UserUpdate,
)

__all__ = [
	"CompanyCreate",
	"CompanyDetail",
	"CompanyDetailResponse",
	"CompanyFilter",
	"CompanyListResponse",
	"CompanyRead",
	"CompanyResponse",
	"CompanyUpdate",
	"JobCreate",
	"JobFilter",
	"JobListResponse",
	"JobRead",
	"JobResponse",
	"JobUpdate",
	"AppliedResponse",
	"DeletedResponse",
	"TokenResponse",
	"UserCreate",
	"UserCreatedResponse",
	"UserDetail",
	"UserDetailResponse",
	"UserListResponse",
	"UserLogin",
	"UserRead",
	"UserRegister",
	"UserUpdate",
]
