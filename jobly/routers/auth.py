# auth.py
from fastapi import APIRouter, status

from jobly.schemas.user import TokenResponse, UserLogin, UserRegister
from jobly.services import user_service
from jobly.utils.jwt_handler import create_token


router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def login(credentials: UserLogin) -> TokenResponse:
    user = user_service.authenticate(credentials.username, credentials.password)
    return TokenResponse(token=create_token(user["username"], user["is_admin"]))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(user_in: UserRegister) -> TokenResponse:
    # Self-registration never grants admin; admins are created through POST /users.
    user = user_service.register(user_in)
    return TokenResponse(token=create_token(user["username"], False))
