from __future__ import annotations

from common.models.user import User
from common.mongo.types import (
    BaseDocument,
    build_document_data_from_domain,
    from_object_id,
)


class UserDocument(BaseDocument):
    """MongoDB users 컬렉션 도큐먼트 모델."""

    name: str
    email: str
    password_hash: str

    @classmethod
    def from_domain(cls, user: User) -> "UserDocument":
        return cls.model_validate(build_document_data_from_domain(user))

    def to_domain(self) -> User:
        return User(
            id=from_object_id(self.id),
            name=self.name,
            email=self.email,
            password_hash=self.password_hash,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
