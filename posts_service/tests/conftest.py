from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from posts_service.app.auth import security
from posts_service.app.config import AppConfig
from posts_service.app.main import app
from posts_service.app.services.posts_service import get_post_repository
from posts_service.app.services.users_service import get_user_repository

from .fakes import FakePostRepository, FakeUserRepository, build_auth_headers


@pytest.fixture(autouse=True)
def jwt_secret_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(security.JWT_SECRET_ENV, "test-secret")


@pytest.fixture
def post_repo() -> FakePostRepository:
    return FakePostRepository()


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def client(
    post_repo: FakePostRepository,
    user_repo: FakeUserRepository,
) -> Iterator[TestClient]:
    # lifespan(Mongo 연결)을 타지 않도록 컨텍스트 매니저 없이 사용한다.
    app.dependency_overrides[get_post_repository] = lambda: post_repo
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(config: AppConfig) -> dict[str, str]:
    return build_auth_headers("user-001", config)
