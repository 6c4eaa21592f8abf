# users.py
from fastapi import APIRouter, Depends, status

from jobly.middleware.auth import require_admin, require_self_or_admin
from jobly.schemas.user import (
    AppliedResponse,
    DeletedResponse,
    UserCreate,
    UserCreatedResponse,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from jobly.services import user_service
from jobly.utils.jwt_handler import create_token


router = APIRouter()


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_user(user_in: UserCreate) -> UserCreatedResponse:
    """Admin-only signup; unlike /auth/register this may create another admin."""

    user = user_service.register(user_in)
    return UserCreatedResponse(user=user, token=create_token(user["username"], user["is_admin"]))


@router.get("", response_model=UserListResponse, dependencies=[Depends(require_admin)])
def list_users() -> UserListResponse:
    return UserListResponse(users=user_service.find_users())


@router.get("/{username}", response_model=UserDetailResponse, dependencies=[Depends(require_self_or_admin)])
def get_user(username: str) -> UserDetailResponse:
    return UserDetailResponse(user=user_service.get_user(username))


@router.patch("/{username}", response_model=UserResponse, dependencies=[Depends(require_self_or_admin)])
def update_user(username: str, update: UserUpdate) -> UserResponse:
    data = update.model_dump(exclude_unset=True, by_alias=True)
    return UserResponse(user=user_service.update_user(username, data))


@router.delete("/{username}", response_model=DeletedResponse, dependencies=[Depends(require_self_or_admin)])
def delete_user(username: str) -> DeletedResponse:
    user_service.remove_user(username)
    return DeletedResponse(deleted=username)


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=AppliedResponse,
    dependencies=[Depends(require_self_or_admin)],
)
def apply_to_job(username: str, job_id: int) -> AppliedResponse:
    user_service.apply_to_job(username, job_id)
    return AppliedResponse(applied=job_id)
