# user.py
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from jobly.schemas.base import CamelModel, CamelRequest, reject_null


def _validate_email_like(value: str) -> str:
    value = (value or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class UserLogin(CamelRequest):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserRegister(CamelRequest):
    username: str = Field(min_length=1, max_length=30)
    password: str = Field(min_length=5, max_length=72)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserCreate(UserRegister):
    is_admin: bool = False


class UserUpdate(CamelRequest):
    password: Optional[str] = Field(default=None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    email: Optional[str] = Field(default=None, min_length=6, max_length=60)

    @field_validator("password", "first_name", "last_name")
    @classmethod
    def _not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: Optional[str]) -> str:
        return _validate_email_like(reject_null(v, "email"))


class UserRead(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


class UserDetail(UserRead):
    jobs: list[int] = Field(default_factory=list)


class UserResponse(CamelModel):
    user: UserRead


class UserDetailResponse(CamelModel):
    user: UserDetail


class UserListResponse(CamelModel):
    users: list[UserRead]


class UserCreatedResponse(CamelModel):
    user: UserRead
    token: str


class TokenResponse(CamelModel):
    token: str


class DeletedResponse(CamelModel):
    deleted: str


class AppliedResponse(CamelModel):
    applied: int
