"""보호된 라우트에서 사용하는 인증 의존성."""

from __future__ import annotations

from fastapi import Header, HTTPException, status

from ..auth import security
from ..config import get_config
from ..exceptions import AuthTokenError


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="missing authorization header",
        )

    scheme, _, token = raw.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="authorization must be: Bearer <token>",
        )
    return token.strip()


def get_current_user_id(authorization: str | None = Header(default=None)) -> str:
    """Authorization 헤더의 액세스 토큰을 검증하고 토큰 주체(user id)를 반환한다."""

    token = _extract_bearer_token(authorization)
    try:
        payload = security.decode_access_token(token, get_config().auth)
    except AuthTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
    return str(payload["sub"])
