from __future__ import annotations

import pytest
from bson import ObjectId

from common.models.post import (
    ListPostsFilter,
    PostCreateInput,
    PostUpdateInput,
    SearchPostsFilter,
)
from posts_service.app.services.posts_service import PostsService, normalize_tags

from .fakes import FakePostRepository


@pytest.fixture
def service(post_repo: FakePostRepository) -> PostsService:
    return PostsService(post_repo)


def _create(service: PostsService, **overrides: object) -> str:
    data: dict[str, object] = {"title": "A", "message": "B", "creator": "u1"}
    data.update(overrides)
    post = service.create_post(PostCreateInput(**data))
    assert post.id is not None
    return post.id


def test_normalize_tags_strips_and_deduplicates() -> None:
    assert normalize_tags([" a", "b ", "", "a", "  "]) == ["a", "b"]


def test_create_post_starts_without_likes_or_comments(service: PostsService) -> None:
    post_id = _create(service, name="Ada")

    post = service.get_post(post_id)

    assert post is not None
    assert post.creator == "u1"
    assert post.name == "Ada"
    assert post.likes == []
    assert post.comments == []
    assert post.created_at == post.updated_at


def test_update_post_only_changes_given_fields(service: PostsService) -> None:
    post_id = _create(service, tags=["x"])

    updated = service.update_post(post_id, PostUpdateInput(tags=[" y ", "y"]))

    assert updated is not None
    assert updated.tags == ["y"]
    assert updated.title == "A"
    assert updated.message == "B"


def test_update_unknown_post_returns_none(
    service: PostsService, post_repo: FakePostRepository
) -> None:
    _create(service)
    before = dict(post_repo.posts)

    assert service.update_post(str(ObjectId()), PostUpdateInput(title="X")) is None
    assert post_repo.posts == before


def test_delete_post_reports_whether_it_existed(service: PostsService) -> None:
    post_id = _create(service)

    assert service.delete_post(post_id) is True
    assert service.delete_post(post_id) is False
    assert service.get_post(post_id) is None


def test_list_posts_returns_total(service: PostsService) -> None:
    for i in range(5):
        _create(service, title=f"p{i}")

    items, total = service.list_posts(ListPostsFilter(page=1, page_size=2))

    assert total == 5
    assert len(items) == 2


def test_search_posts_matches_title_or_tag(service: PostsService) -> None:
    _create(service, title="Hello World")
    _create(service, title="Other", tags=["news"])

    titles = {p.title for p in service.search_posts(SearchPostsFilter(search_query="world", tags=["news"]))}

    assert titles == {"Hello World", "Other"}


def test_like_post_toggles(service: PostsService) -> None:
    post_id = _create(service)

    liked = service.like_post(post_id, "u2")
    unliked = service.like_post(post_id, "u2")

    assert liked is not None and liked.like_count == 1
    assert unliked is not None and unliked.like_count == 0


def test_comment_unknown_post_returns_none(service: PostsService) -> None:
    assert service.comment_post(str(ObjectId()), "hi") is None
