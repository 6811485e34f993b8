from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.models.user import AuthResult, UserProfile
from common.types.datetime import UtcDateTime


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# bcrypt 는 72 바이트를 넘는 비밀번호를 받지 않는다.
PASSWORD_MAX_BYTES = 72


class SignupRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)

    @field_validator("password", "confirm_password")
    @classmethod
    def _limit_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """비밀번호 해시를 제외한 유저 응답 DTO."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    created_at: UtcDateTime
    updated_at: UtcDateTime

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "UserResponse":
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class AuthResponse(BaseModel):
    result: UserResponse
    token: str

    @classmethod
    def from_domain(cls, auth: AuthResult) -> "AuthResponse":
        return cls(result=UserResponse.from_domain(auth.profile), token=auth.token)
