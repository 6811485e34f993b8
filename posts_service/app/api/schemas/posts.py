from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from common.models.post import Post
from common.types.datetime import UtcDateTime


class PostResponse(BaseModel):
    """포스트 응답 DTO.

    도메인 모델(Post)을 그대로 노출하지 않고, API 경계를 위한 전용 응답 모델을 사용한다.
    식별자는 도큐먼트 저장소와 동일하게 ``_id`` 로 내보낸다.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    message: str
    creator: str
    name: str
    tags: list[str]
    selected_file: str
    likes: list[str]
    like_count: int
    comments: list[str]
    created_at: UtcDateTime
    updated_at: UtcDateTime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        """도메인 Post 모델을 응답 DTO 로 변환한다."""

        if post.id is None:
            raise ValueError("post has no id")
        return cls(
            id=post.id,
            title=post.title,
            message=post.message,
            creator=post.creator,
            name=post.name,
            tags=post.tags,
            selected_file=post.selected_file,
            likes=post.likes,
            like_count=post.like_count,
            comments=post.comments,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class ListPostsResponse(BaseModel):
    total: int
    items: list[PostResponse]


class PostCreateRequest(BaseModel):
    """포스트 생성 요청 DTO.

    creator 는 인증 토큰에서 채우며, 바디에 포함된 creator 등 알 수 없는 필드는 무시한다.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=300)
    message: str = Field(..., min_length=1)
    name: str = ""
    tags: list[str] = Field(default_factory=list)
    selected_file: str = ""


class PostUpdateRequest(BaseModel):
    """포스트 부분 수정 요청 DTO. 전달된 필드만 변경한다."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=300)
    message: str | None = Field(default=None, min_length=1)
    name: str | None = None
    tags: list[str] | None = None
    selected_file: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _reject_empty_patch(cls, data: Any) -> Any:
        if isinstance(data, dict) and not any(v is not None for v in data.values()):
            raise ValueError("at least one field must be provided")
        return data


class CommentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    value: str = Field(..., min_length=1, max_length=2000)
