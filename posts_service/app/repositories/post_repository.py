from __future__ import annotations

import re
from typing import Any

from pymongo import ReturnDocument
from pymongo.database import Database

from common.models.post import ListPostsFilter, Post, SearchPostsFilter
from common.mongo.client import POSTS_COLLECTION
from common.mongo.types import parse_object_id
from common.types.datetime import utc_now

from ..config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .documents.post_document import PostDocument
from .interfaces import PostRepositoryInterface


# 부분 수정(PATCH)으로 바꿀 수 있는 필드
UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"title", "message", "name", "tags", "selected_file"}
)


class PostRepository(PostRepositoryInterface):
    """posts 컬렉션에 대한 MongoDB 접근 레이어."""

    def __init__(self, database: Database) -> None:
        """Mongo Database를 의존성으로 받고, posts 컬렉션을 내부에서 선택한다."""

        self._db = database
        self._col = database[POSTS_COLLECTION]

    # --- helpers -----------------------------------------------------------------
    @staticmethod
    def _from_document(doc: dict) -> Post:
        return PostDocument.model_validate(doc).to_domain()

    # --- queries -----------------------------------------------------------------
    def list(self, flt: ListPostsFilter) -> tuple[list[Post], int]:
        """최신순으로 정렬된 포스트 한 페이지와 전체 개수를 반환한다."""

        page = flt.page if flt.page > 0 else 1
        page_size = flt.page_size
        if page_size <= 0 or page_size > MAX_PAGE_SIZE:
            page_size = DEFAULT_PAGE_SIZE

        skip = (page - 1) * page_size

        total = self._col.count_documents({})
        cursor = self._col.find(
            {},
            sort=[("created_at", -1), ("_id", -1)],
            skip=skip,
            limit=page_size,
        )

        items = [self._from_document(doc) for doc in cursor]
        return items, total

    def search(self, flt: SearchPostsFilter) -> list[Post]:
        conditions: list[dict[str, Any]] = []

        query = (flt.search_query or "").strip()
        if query:
            # 사용자 입력은 정규식이 아니라 리터럴로 취급한다.
            conditions.append({"title": re.compile(re.escape(query), re.IGNORECASE)})

        tags = [t.strip() for t in flt.tags if t.strip()]
        if tags:
            conditions.append({"tags": {"$in": tags}})

        if not conditions:
            return []

        cursor = self._col.find(
            {"$or": conditions},
            sort=[("created_at", -1), ("_id", -1)],
        )
        return [self._from_document(doc) for doc in cursor]

    def find_by_id(self, id_value: str) -> Post | None:
        oid = parse_object_id(id_value)
        if oid is None:
            return None
        doc = self._col.find_one({"_id": oid})
        if not doc:
            return None
        return self._from_document(doc)

    # --- commands ----------------------------------------------------------------
    def insert(self, post: Post) -> str:
        """새 포스트를 삽입하고 생성된 ID 를 반환한다.

        created_at/updated_at 은 서비스 레이어에서 채운 값을 그대로 저장한다.
        """

        payload = PostDocument.from_domain(post).to_mongo_record()
        result = self._col.insert_one(payload)
        return str(result.inserted_id)

    def update_fields(self, id_value: str, updates: dict[str, Any]) -> Post | None:
        oid = parse_object_id(id_value)
        if oid is None:
            return None

        # 라우터 스키마를 거치지 않는 직접 호출도 막는다.
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"fields are not updatable: {sorted(unknown)}")

        set_doc: dict[str, Any] = {"updated_at": utc_now()}
        set_doc.update(updates)
        doc = self._col.find_one_and_update(
            {"_id": oid},
            {"$set": set_doc},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return self._from_document(doc)

    def toggle_like(self, id_value: str, user_id: str) -> Post | None:
        """user_id 가 likes 에 있으면 제거하고, 없으면 추가한다.

        읽고-쓰기 사이의 경쟁을 피하기 위해 aggregation pipeline 업데이트 한 번으로 처리한다.
        """

        oid = parse_object_id(id_value)
        if oid is None:
            return None

        likes = {"$ifNull": ["$likes", []]}
        pipeline = [
            {
                "$set": {
                    "likes": {
                        "$cond": [
                            {"$in": [user_id, likes]},
                            {
                                "$filter": {
                                    "input": likes,
                                    "as": "uid",
                                    "cond": {"$ne": ["$$uid", user_id]},
                                }
                            },
                            {"$concatArrays": [likes, [user_id]]},
                        ]
                    },
                    "updated_at": utc_now(),
                }
            }
        ]
        doc = self._col.find_one_and_update(
            {"_id": oid},
            pipeline,
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return self._from_document(doc)

    def add_comment(self, id_value: str, comment: str) -> Post | None:
        oid = parse_object_id(id_value)
        if oid is None:
            return None

        doc = self._col.find_one_and_update(
            {"_id": oid},
            {"$push": {"comments": comment}, "$set": {"updated_at": utc_now()}},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return self._from_document(doc)

    def delete_by_id(self, id_value: str) -> bool:
        """삭제된 도큐먼트가 있으면 True, 없으면 False 를 반환한다."""

        oid = parse_object_id(id_value)
        if oid is None:
            return False
        result = self._col.delete_one({"_id": oid})
        return result.deleted_count > 0
