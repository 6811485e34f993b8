from __future__ import annotations

from typing import Any, Protocol

from common.models.post import ListPostsFilter, Post, SearchPostsFilter
from common.models.user import User


class PostRepositoryInterface(Protocol):
    """PostRepository가 따라야 할 최소한의 계약.

    Service 레이어는 이 인터페이스에만 의존하고, 구체 구현(Mongo 등)은 몰라도 된다.
    식별자가 어떤 도큐먼트도 가리키지 않으면 None/False 를 반환한다.
    """

    def list(
        self, flt: ListPostsFilter
    ) -> tuple[list[Post], int]:  # pragma: no cover - Protocol
        ...

    def search(
        self, flt: SearchPostsFilter
    ) -> list[Post]:  # pragma: no cover - Protocol
        ...

    def insert(self, post: Post) -> str:  # pragma: no cover - Protocol
        ...

    def find_by_id(self, id_value: str) -> Post | None:  # pragma: no cover - Protocol
        ...

    def update_fields(
        self, id_value: str, updates: dict[str, Any]
    ) -> Post | None:  # pragma: no cover - Protocol
        """필드를 $set 으로 병합하고 갱신된 포스트를 반환한다."""
        ...

    def toggle_like(
        self, id_value: str, user_id: str
    ) -> Post | None:  # pragma: no cover - Protocol
        ...

    def add_comment(
        self, id_value: str, comment: str
    ) -> Post | None:  # pragma: no cover - Protocol
        ...

    def delete_by_id(self, id_value: str) -> bool:  # pragma: no cover - Protocol
        ...


class UserRepositoryInterface(Protocol):
    """UserRepository가 따라야 할 최소한의 계약."""

    def find_by_email(self, email: str) -> User | None:  # pragma: no cover - Protocol
        ...

    def insert(self, user: User) -> User:  # pragma: no cover - Protocol
        ...
