from __future__ import annotations

from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from posts_service.app.main import app
from posts_service.app.services.posts_service import get_post_repository

from .fakes import FakePostRepository


class UnavailablePostRepository(FakePostRepository):
    def find_by_id(self, id_value: str):  # type: ignore[override]
        raise ServerSelectionTimeoutError("no servers available")


def test_store_failure_maps_to_generic_5xx() -> None:
    app.dependency_overrides[get_post_repository] = UnavailablePostRepository
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/posts/65a000000000000000000000")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json() == {"detail": "database unavailable"}
