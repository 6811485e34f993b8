from __future__ import annotations

from fastapi.testclient import TestClient

from posts_service.app.auth import security
from posts_service.app.config import AppConfig

from .fakes import FakeUserRepository


SIGNUP_BODY = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "Ada@Example.com",
    "password": "s3cret",
    "confirm_password": "s3cret",
}


def test_signup_returns_profile_and_token(
    client: TestClient, user_repo: FakeUserRepository
) -> None:
    response = client.post("/user/signup", json=SIGNUP_BODY)

    assert response.status_code == 201
    body = response.json()
    assert body["result"]["name"] == "Ada Lovelace"
    assert body["result"]["email"] == "ada@example.com"
    assert "password_hash" not in body["result"]

    payload = security.decode_access_token(body["token"], AppConfig().auth)
    assert payload["sub"] == body["result"]["_id"]

    stored = user_repo.find_by_email("ada@example.com")
    assert stored is not None
    assert stored.password_hash != "s3cret"


def test_signup_token_authorizes_post_creation(client: TestClient) -> None:
    signup = client.post("/user/signup", json=SIGNUP_BODY).json()

    response = client.post(
        "/posts",
        json={"title": "A", "message": "B"},
        headers={"Authorization": f"Bearer {signup['token']}"},
    )

    assert response.status_code == 201
    assert response.json()["creator"] == signup["result"]["_id"]


def test_signup_rejects_existing_email(client: TestClient) -> None:
    client.post("/user/signup", json=SIGNUP_BODY)

    response = client.post(
        "/user/signup", json={**SIGNUP_BODY, "email": "ada@example.com"}
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "user already exists"}


def test_signup_rejects_password_mismatch(
    client: TestClient, user_repo: FakeUserRepository
) -> None:
    response = client.post(
        "/user/signup", json={**SIGNUP_BODY, "confirm_password": "other"}
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "passwords don't match"}
    assert user_repo.users == {}


def test_signup_rejects_malformed_email(client: TestClient) -> None:
    response = client.post("/user/signup", json={**SIGNUP_BODY, "email": "nope"})

    assert response.status_code == 422


def test_login_with_valid_credentials(client: TestClient) -> None:
    signup = client.post("/user/signup", json=SIGNUP_BODY).json()

    response = client.post(
        "/user/login", json={"email": "ada@example.com", "password": "s3cret"}
    )

    assert response.status_code == 200
    assert response.json()["result"]["_id"] == signup["result"]["_id"]


def test_login_unknown_user_returns_not_found(client: TestClient) -> None:
    response = client.post(
        "/user/login", json={"email": "ghost@example.com", "password": "x"}
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "user doesn't exist"}


def test_login_wrong_password_returns_bad_request(client: TestClient) -> None:
    client.post("/user/signup", json=SIGNUP_BODY)

    response = client.post(
        "/user/login", json={"email": "ada@example.com", "password": "wrong"}
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "invalid credentials"}


def test_signup_rejects_password_longer_than_72_bytes(
    client: TestClient, user_repo: FakeUserRepository
) -> None:
    response = client.post(
        "/user/signup",
        json={**SIGNUP_BODY, "password": "x" * 100, "confirm_password": "x" * 100},
    )

    assert response.status_code == 422
    assert user_repo.find_by_email("ada@example.com") is None


def test_signup_counts_password_length_in_utf8_bytes(client: TestClient) -> None:
    # 25자지만 UTF-8 로는 75 바이트
    password = "가" * 25

    response = client.post(
        "/user/signup",
        json={**SIGNUP_BODY, "password": password, "confirm_password": password},
    )

    assert response.status_code == 422


def test_signup_accepts_password_of_exactly_72_bytes(client: TestClient) -> None:
    password = "x" * 72

    response = client.post(
        "/user/signup",
        json={**SIGNUP_BODY, "password": password, "confirm_password": password},
    )

    assert response.status_code == 201
