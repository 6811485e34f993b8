from __future__ import annotations

import logging

from fastapi import Depends
from pymongo.database import Database

from common.models.post import (
    ListPostsFilter,
    Post,
    PostCreateInput,
    PostUpdateInput,
    SearchPostsFilter,
)
from common.mongo.client import get_database
from common.types.datetime import utc_now

from ..repositories.interfaces import PostRepositoryInterface
from ..repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


def normalize_tags(tags: list[str]) -> list[str]:
    """공백을 제거하고 빈 태그와 중복을 걸러낸다. (입력 순서 유지)"""

    seen: set[str] = set()
    result: list[str] = []
    for tag in tags:
        value = tag.strip()
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


class PostsService:
    """포스트 조회/검색 및 관리(CRUD) 비즈니스 로직.

    - Repository(PostRepositoryInterface)에만 의존하고, Mongo 세부 구현은 알지 않는다.
    - 식별자가 존재하지 않으면 None/False 를 반환하고, HTTP 매핑은 라우터가 담당한다.
    """

    def __init__(self, post_repo: PostRepositoryInterface) -> None:
        self._post_repo = post_repo

    def list_posts(self, filter_: ListPostsFilter) -> tuple[list[Post], int]:
        return self._post_repo.list(filter_)

    def search_posts(self, filter_: SearchPostsFilter) -> list[Post]:
        return self._post_repo.search(filter_)

    def get_post(self, post_id: str) -> Post | None:
        return self._post_repo.find_by_id(post_id)

    def create_post(self, input_model: PostCreateInput) -> Post:
        now = utc_now()
        post = Post(
            id=None,
            created_at=now,
            updated_at=now,
            title=input_model.title,
            message=input_model.message,
            creator=input_model.creator,
            name=input_model.name,
            tags=normalize_tags(input_model.tags),
            selected_file=input_model.selected_file,
            likes=[],
            comments=[],
        )

        post.id = self._post_repo.insert(post)
        logger.info("post created", extra={"post_id": post.id, "user_id": post.creator})
        return post

    def update_post(self, post_id: str, input_model: PostUpdateInput) -> Post | None:
        updates = input_model.to_updates()
        if "tags" in updates:
            updates["tags"] = normalize_tags(updates["tags"])
        return self._post_repo.update_fields(post_id, updates)

    def delete_post(self, post_id: str) -> bool:
        deleted = self._post_repo.delete_by_id(post_id)
        if deleted:
            logger.info("post deleted", extra={"post_id": post_id})
        return deleted

    def like_post(self, post_id: str, user_id: str) -> Post | None:
        return self._post_repo.toggle_like(post_id, user_id)

    def comment_post(self, post_id: str, comment: str) -> Post | None:
        return self._post_repo.add_comment(post_id, comment)


def get_post_repository(
    db: Database = Depends(get_database),
) -> PostRepositoryInterface:
    """FastAPI DI용 PostRepository 팩토리."""

    return PostRepository(db)


def get_posts_service(
    post_repo: PostRepositoryInterface = Depends(get_post_repository),
) -> PostsService:
    """FastAPI DI용 PostsService 팩토리."""

    return PostsService(post_repo)
