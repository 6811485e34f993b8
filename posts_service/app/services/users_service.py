from __future__ import annotations

import logging

from fastapi import Depends
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from common.models.user import AuthResult, LoginInput, SignupInput, User, UserProfile
from common.mongo.client import get_database
from common.types.datetime import utc_now

from ..auth import security
from ..config import AuthConfig, get_config
from ..exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from ..repositories.interfaces import UserRepositoryInterface
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UsersService:
    """회원가입/로그인 비즈니스 로직.

    - Repository(UserRepositoryInterface)에만 의존하고, Mongo 세부 구현은 알지 않는다.
    - 실패는 도메인 예외로 표현하고, HTTP 상태 코드는 라우터에서 결정한다.
    """

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        auth_config: AuthConfig,
    ) -> None:
        self._user_repo = user_repo
        self._auth_config = auth_config

    def signup(self, input_model: SignupInput) -> AuthResult:
        email = normalize_email(input_model.email)

        if self._user_repo.find_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        if input_model.password != input_model.confirm_password:
            raise PasswordMismatchError()

        now = utc_now()
        user = User(
            id=None,
            name=f"{input_model.first_name.strip()} {input_model.last_name.strip()}",
            email=email,
            password_hash=security.hash_password(input_model.password),
            created_at=now,
            updated_at=now,
        )

        try:
            created = self._user_repo.insert(user)
        except DuplicateKeyError as exc:
            # 동시 가입 요청이 find_by_email 검사를 함께 통과한 경우
            raise UserAlreadyExistsError(email) from exc

        logger.info("user signed up", extra={"user_id": created.id})
        return self._issue(created)

    def login(self, input_model: LoginInput) -> AuthResult:
        email = normalize_email(input_model.email)

        user = self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)

        if not security.verify_password(input_model.password, user.password_hash):
            raise InvalidCredentialsError()

        return self._issue(user)

    def _issue(self, user: User) -> AuthResult:
        profile = self._to_profile(user)
        token = security.build_access_token(
            user_id=profile.id,
            email=profile.email,
            config=self._auth_config,
        )
        return AuthResult(profile=profile, token=token)

    @staticmethod
    def _to_profile(user: User) -> UserProfile:
        if user.id is None:
            raise RuntimeError("user has no id; it must be persisted first")
        return UserProfile(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def get_user_repository(
    db: Database = Depends(get_database),
) -> UserRepositoryInterface:
    """FastAPI DI용 UserRepository 팩토리."""

    return UserRepository(db)


def get_users_service(
    user_repo: UserRepositoryInterface = Depends(get_user_repository),
) -> UsersService:
    """FastAPI DI용 UsersService 팩토리."""

    return UsersService(user_repo=user_repo, auth_config=get_config().auth)
