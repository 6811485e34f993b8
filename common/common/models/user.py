from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .utils import normalize_id_fields_to_str


class User(BaseModel):
    """유저 도메인 모델.

    - Mongo users 컬렉션과 1:1로 매핑되는 공용 모델이다.
    - email 로 유니크하게 식별하며, 비밀번호는 bcrypt 해시로만 보관한다.
    """

    id: str | None = Field(default=None, alias="id")
    name: str = Field(alias="name")
    email: str = Field(alias="email")
    password_hash: str = Field(alias="password_hash")
    created_at: datetime = Field(alias="created_at")
    updated_at: datetime = Field(alias="updated_at")

    @model_validator(mode="before")
    @classmethod
    def _normalize_object_ids(cls, data: Any) -> Any:
        return normalize_id_fields_to_str(data, fields=["id"])


class SignupInput(BaseModel):
    """회원가입 입력 모델."""

    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str


class LoginInput(BaseModel):
    email: str
    password: str


class UserProfile(BaseModel):
    """비밀번호 해시를 제외한 유저 프로필.

    - API 응답 스키마에서 재사용할 수 있도록 분리한다.
    """

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class AuthResult(BaseModel):
    """회원가입/로그인 결과: 프로필 + 액세스 토큰."""

    profile: UserProfile
    token: str
