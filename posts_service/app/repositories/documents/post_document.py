from __future__ import annotations

from pydantic import Field

from common.models.post import Post
from common.mongo.types import (
    BaseDocument,
    build_document_data_from_domain,
    from_object_id,
)


class PostDocument(BaseDocument):
    """MongoDB posts 컬렉션 도큐먼트 모델."""

    title: str
    message: str
    creator: str
    # 예전 도큐먼트에는 필드가 누락될 수 있으므로 기본값을 둔다.
    name: str = ""
    tags: list[str] = Field(default_factory=list)
    selected_file: str = ""
    likes: list[str] = Field(default_factory=list)
    comments: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, post: Post) -> "PostDocument":
        return cls.model_validate(build_document_data_from_domain(post))

    def to_domain(self) -> Post:
        return Post(
            id=from_object_id(self.id),
            created_at=self.created_at,
            updated_at=self.updated_at,
            title=self.title,
            message=self.message,
            creator=self.creator,
            name=self.name,
            tags=list(self.tags),
            selected_file=self.selected_file,
            likes=list(self.likes),
            comments=list(self.comments),
        )
