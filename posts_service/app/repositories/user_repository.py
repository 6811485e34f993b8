from __future__ import annotations

from pymongo.database import Database

from common.models.user import User
from common.mongo.client import USERS_COLLECTION

from .documents.user_document import UserDocument
from .interfaces import UserRepositoryInterface


class UserRepository(UserRepositoryInterface):
    """users 컬렉션에 대한 MongoDB 접근 레이어."""

    def __init__(self, database: Database) -> None:
        self._db = database
        self._col = database[USERS_COLLECTION]

    @staticmethod
    def _from_document(doc: dict) -> User:
        return UserDocument.model_validate(doc).to_domain()

    def find_by_email(self, email: str) -> User | None:
        doc = self._col.find_one({"email": email})
        if not doc:
            return None
        return self._from_document(doc)

    def insert(self, user: User) -> User:
        """유저를 삽입하고 _id 가 채워진 도메인 모델을 반환한다.

        email 유니크 인덱스 위반 시 pymongo DuplicateKeyError 가 그대로 전파된다.
        """

        payload = UserDocument.from_domain(user).to_mongo_record()
        result = self._col.insert_one(payload)
        payload["_id"] = result.inserted_id
        return self._from_document(payload)
