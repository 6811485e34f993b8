from __future__ import annotations

import re
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from common.models.post import ListPostsFilter, Post, SearchPostsFilter
from common.mongo.types import parse_object_id
from posts_service.app.repositories.documents.post_document import PostDocument
from posts_service.app.repositories.post_repository import PostRepository


def _raw_post(oid: ObjectId, **overrides: object) -> dict:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    doc = {
        "_id": oid,
        "created_at": now,
        "updated_at": now,
        "title": "A",
        "message": "B",
        "creator": "u1",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repo(collection: MagicMock) -> PostRepository:
    database = MagicMock()
    database.__getitem__.return_value = collection
    return PostRepository(database)


def test_parse_object_id_returns_none_for_malformed_values() -> None:
    oid = ObjectId()

    assert parse_object_id(str(oid)) == oid
    assert parse_object_id("not-an-id") is None
    assert parse_object_id(None) is None


def test_document_from_legacy_record_fills_defaults() -> None:
    oid = ObjectId()

    post = PostDocument.model_validate(_raw_post(oid)).to_domain()

    assert post.id == str(oid)
    assert post.tags == []
    assert post.likes == []
    assert post.comments == []
    assert post.like_count == 0


def test_find_by_id_with_malformed_id_skips_the_store(
    repo: PostRepository, collection: MagicMock
) -> None:
    assert repo.find_by_id("nope") is None
    collection.find_one.assert_not_called()


def test_find_by_id_maps_document_to_domain(
    repo: PostRepository, collection: MagicMock
) -> None:
    oid = ObjectId()
    collection.find_one.return_value = _raw_post(oid, tags=["x"], likes=["u2"])

    post = repo.find_by_id(str(oid))

    assert post is not None
    assert post.id == str(oid)
    assert post.tags == ["x"]
    assert post.like_count == 1
    collection.find_one.assert_called_once_with({"_id": oid})


def test_insert_lets_mongo_assign_the_id(
    repo: PostRepository, collection: MagicMock
) -> None:
    oid = ObjectId()
    collection.insert_one.return_value.inserted_id = oid
    now = datetime.now(timezone.utc)
    post = Post(
        created_at=now, updated_at=now, title="A", message="B", creator="u1"
    )

    inserted_id = repo.insert(post)

    assert inserted_id == str(oid)
    payload = collection.insert_one.call_args.args[0]
    assert "_id" not in payload
    assert payload["title"] == "A"
    assert payload["likes"] == []


def test_update_fields_rejects_non_updatable_fields(repo: PostRepository) -> None:
    with pytest.raises(ValueError, match="likes"):
        repo.update_fields(str(ObjectId()), {"likes": ["u1"]})


def test_update_fields_returns_none_when_nothing_matched(
    repo: PostRepository, collection: MagicMock
) -> None:
    collection.find_one_and_update.return_value = None

    assert repo.update_fields(str(ObjectId()), {"title": "X"}) is None


def test_toggle_like_is_a_single_pipeline_update(
    repo: PostRepository, collection: MagicMock
) -> None:
    oid = ObjectId()
    collection.find_one_and_update.return_value = _raw_post(oid, likes=["u9"])

    post = repo.toggle_like(str(oid), "u9")

    assert post is not None
    filter_doc, update = collection.find_one_and_update.call_args.args
    assert filter_doc == {"_id": oid}
    assert isinstance(update, list)
    assert "likes" in update[0]["$set"]


def test_search_escapes_query_and_matches_tags(
    repo: PostRepository, collection: MagicMock
) -> None:
    collection.find.return_value = []

    repo.search(SearchPostsFilter(search_query="c++", tags=["a", " "]))

    filter_doc = collection.find.call_args.args[0]
    title_cond, tags_cond = filter_doc["$or"]
    pattern = title_cond["title"]
    assert pattern.pattern == re.escape("c++")
    assert pattern.flags & re.IGNORECASE
    assert tags_cond == {"tags": {"$in": ["a"]}}


def test_search_without_criteria_returns_empty(
    repo: PostRepository, collection: MagicMock
) -> None:
    assert repo.search(SearchPostsFilter()) == []
    collection.find.assert_not_called()


def test_list_clamps_out_of_range_page_size(
    repo: PostRepository, collection: MagicMock
) -> None:
    collection.count_documents.return_value = 0
    collection.find.return_value = []

    repo.list(ListPostsFilter(page=0, page_size=1000))

    kwargs = collection.find.call_args.kwargs
    assert kwargs["skip"] == 0
    assert kwargs["limit"] == 8


def test_insert_keeps_timestamps_set_by_caller(
    repo: PostRepository, collection: MagicMock
) -> None:
    collection.insert_one.return_value.inserted_id = ObjectId()
    created = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    post = Post(
        created_at=created, updated_at=created, title="A", message="B", creator="u1"
    )

    repo.insert(post)

    payload = collection.insert_one.call_args.args[0]
    assert payload["created_at"] == created
    assert payload["updated_at"] == created
