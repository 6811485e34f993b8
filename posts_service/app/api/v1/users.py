from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from common.models.user import LoginInput, SignupInput

from ...exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from ...services.users_service import UsersService, get_users_service
from ..schemas.users import AuthResponse, LoginRequest, SignupRequest

router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
)
def signup(
    body: SignupRequest,
    service: UsersService = Depends(get_users_service),
) -> AuthResponse:
    try:
        result = service.signup(SignupInput(**body.model_dump()))
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=400, detail="user already exists") from exc
    except PasswordMismatchError as exc:
        raise HTTPException(status_code=400, detail="passwords don't match") from exc
    return AuthResponse.from_domain(result)


@router.post("/login", response_model=AuthResponse, summary="로그인")
def login(
    body: LoginRequest,
    service: UsersService = Depends(get_users_service),
) -> AuthResponse:
    try:
        result = service.login(LoginInput(**body.model_dump()))
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail="user doesn't exist") from exc
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=400, detail="invalid credentials") from exc
    return AuthResponse.from_domain(result)
