from __future__ import annotations

import os
from dataclasses import dataclass


MONGO_URI_ENV = "MONGO_URI"
MONGO_DB_NAME_ENV = "MONGO_DB_NAME"
MONGO_TIMEOUT_MS_ENV = "MONGO_SERVER_SELECTION_TIMEOUT_MS"

DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000


@dataclass(slots=True)
class MongoSettings:
    """MongoDB 접속 설정.

    접속 문자열에는 자격 증명이 포함되므로 소스에 두지 않고 배포 시점에
    환경 변수로만 주입한다.
    """

    uri: str
    db_name: str | None = None
    server_selection_timeout_ms: int = DEFAULT_SERVER_SELECTION_TIMEOUT_MS


def get_mongo_uri() -> str:
    """MongoDB 연결에 사용할 URI를 반환한다.

    설정되지 않은 경우에는 애플리케이션이 즉시 실패하도록 RuntimeError를 발생시킨다.
    """

    value = os.getenv(MONGO_URI_ENV, "").strip()
    if not value:
        raise RuntimeError(
            f"{MONGO_URI_ENV} environment variable is required for MongoDB",
        )
    return value


def get_mongo_db_name() -> str | None:
    """MONGO_DB_NAME 이 없으면 None 을 반환하고, 클라이언트는 URI의 기본 DB를 사용한다."""

    value = os.getenv(MONGO_DB_NAME_ENV, "").strip()
    return value or None


def load_mongo_settings() -> MongoSettings:
    raw_timeout = os.getenv(MONGO_TIMEOUT_MS_ENV, "").strip()
    timeout_ms = DEFAULT_SERVER_SELECTION_TIMEOUT_MS
    if raw_timeout:
        try:
            timeout_ms = int(raw_timeout)
        except ValueError as exc:
            raise RuntimeError(
                f"invalid {MONGO_TIMEOUT_MS_ENV}: {raw_timeout!r}",
            ) from exc

    return MongoSettings(
        uri=get_mongo_uri(),
        db_name=get_mongo_db_name(),
        server_selection_timeout_ms=timeout_ms,
    )
