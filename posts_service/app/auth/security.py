from __future__ import annotations

import os
import time
from typing import Any

import bcrypt
import jwt

from ..config import AuthConfig
from ..exceptions import AuthTokenError


JWT_SECRET_ENV = "JWT_SECRET"


def jwt_secret() -> str:
    """토큰 서명 키를 반환한다. 배포 시점에 환경 변수로 주입해야 한다."""

    value = os.getenv(JWT_SECRET_ENV, "").strip()
    if not value:
        raise RuntimeError(f"{JWT_SECRET_ENV} environment variable is required")
    return value


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("password is empty")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, user_id: str, email: str, config: AuthConfig) -> str:
    issued_at = int(time.time())
    payload = {
        "sub": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + config.token_expire_minutes * 60,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=config.jwt_algorithm)


def decode_access_token(token: str, config: AuthConfig) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthTokenError("access token is empty")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[config.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise AuthTokenError("access token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthTokenError("invalid access token") from exc

    if not str(payload.get("sub") or "").strip():
        raise AuthTokenError("access token has no subject")
    return payload
