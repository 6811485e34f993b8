from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .utils import normalize_id_fields_to_str


class Post(BaseModel):
    """게시글 도메인 모델 (API/저장소에서 공통 사용)"""

    id: str | None = Field(default=None, alias="id")
    created_at: datetime = Field(alias="created_at")
    updated_at: datetime = Field(alias="updated_at")
    title: str
    message: str
    creator: str
    name: str = ""
    tags: list[str] = Field(default_factory=list)
    selected_file: str = Field(default="", alias="selected_file")
    likes: list[str] = Field(default_factory=list)
    comments: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize_object_ids(cls, data: Any) -> Any:
        return normalize_id_fields_to_str(data, fields=["id"])

    @property
    def like_count(self) -> int:
        return len(self.likes)


class PostCreateInput(BaseModel):
    """포스트 생성 입력 모델.

    creator 는 요청 바디가 아니라 인증된 사용자로부터 채워진다.
    """

    title: str
    message: str
    creator: str
    name: str = ""
    tags: list[str] = Field(default_factory=list)
    selected_file: str = ""


class PostUpdateInput(BaseModel):
    """포스트 부분 수정 입력 모델. None 인 필드는 변경하지 않는다."""

    title: str | None = None
    message: str | None = None
    name: str | None = None
    tags: list[str] | None = None
    selected_file: str | None = None

    def to_updates(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ListPostsFilter(BaseModel):
    """포스트 리스트 조회 옵션"""

    page: int = 1
    page_size: int = 8


class SearchPostsFilter(BaseModel):
    """포스트 검색 옵션.

    제목(대소문자 무시, 부분 일치) 또는 태그 중 하나라도 일치하면 결과에 포함한다.
    """

    search_query: str | None = None
    tags: list[str] = Field(default_factory=list)
