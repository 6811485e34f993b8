from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE_NAME = "config.yaml"
CONFIG_PATH_ENV = "POSTS_CONFIG_PATH"

DEFAULT_PAGE_SIZE = 8
MAX_PAGE_SIZE = 100


@dataclass(slots=True)
class PostsConfig:
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(slots=True)
class AuthConfig:
    token_expire_minutes: int = 60
    jwt_algorithm: str = "HS256"


@dataclass(slots=True)
class CorsConfig:
    allow_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass(slots=True)
class AppConfig:
    """posts-service 전체 설정 루트.

    - 비밀 값(MONGO_URI, JWT_SECRET)은 이 파일에 두지 않고 환경 변수로만 주입한다.
    """

    posts: PostsConfig = field(default_factory=PostsConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)


def _find_config_path() -> Path | None:
    """POSTS_CONFIG_PATH 가 있으면 그 경로를, 없으면 현재 작업 디렉토리부터
    상위로 올라가며 config.yaml 을 찾는다.
    """

    explicit = os.getenv(CONFIG_PATH_ENV, "").strip()
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise RuntimeError(f"{CONFIG_PATH_ENV} points to a missing file: {path}")
        return path

    current = Path.cwd()
    for directory in (current, *current.parents):
        candidate = directory / DEFAULT_CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate

    return None


def _read_int(section: dict[str, Any], key: str, default: int, path: Path) -> int:
    raw = section.get(key, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:  # noqa: TRY003
        raise RuntimeError(f"invalid {key} in {path}: {raw!r}") from exc


def parse_config(data: dict[str, Any], path: Path) -> AppConfig:
    posts_raw = data.get("posts") or {}
    page_size = _read_int(posts_raw, "page_size", DEFAULT_PAGE_SIZE, path)
    if page_size <= 0 or page_size > MAX_PAGE_SIZE:
        raise RuntimeError(
            f"invalid posts.page_size in {path}: {page_size} (1..{MAX_PAGE_SIZE})",
        )

    auth_raw = data.get("auth") or {}
    expire_minutes = _read_int(auth_raw, "token_expire_minutes", 60, path)
    if expire_minutes <= 0:
        raise RuntimeError(
            f"invalid auth.token_expire_minutes in {path}: {expire_minutes}",
        )
    algorithm = str(auth_raw.get("jwt_algorithm") or "HS256").strip() or "HS256"

    cors_raw = data.get("cors") or {}
    origins_raw = cors_raw.get("allow_origins")
    if origins_raw is None:
        origins = ["*"]
    elif isinstance(origins_raw, list):
        origins = [str(o).strip() for o in origins_raw if str(o).strip()]
    else:
        raise RuntimeError(f"cors.allow_origins in {path} must be a list")

    return AppConfig(
        posts=PostsConfig(page_size=page_size),
        auth=AuthConfig(token_expire_minutes=expire_minutes, jwt_algorithm=algorithm),
        cors=CorsConfig(allow_origins=origins),
    )


def load_config() -> AppConfig:
    """posts-service 설정을 로드하여 AppConfig 로 반환한다.

    config.yaml 을 찾지 못하면 기본값을 사용한다.
    """

    path = _find_config_path()
    if path is None:
        logger.warning("%s not found, using default settings", DEFAULT_CONFIG_FILE_NAME)
        return AppConfig()

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise RuntimeError(f"{path} must contain a mapping at the top level")

    return parse_config(data, path)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """FastAPI DI 및 앱 생성 시 사용하는 캐시된 설정."""

    return load_config()
