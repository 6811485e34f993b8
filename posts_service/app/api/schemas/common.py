"""공통 스키마 정의."""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel


T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """페이지네이션 응답 공통 스키마."""

    items: list[T]
    total: int
    page: int
    page_size: int
    number_of_pages: int

    @staticmethod
    def count_pages(total: int, page_size: int) -> int:
        if page_size <= 0:
            return 0
        return math.ceil(total / page_size)


class MessageResponse(BaseModel):
    message: str
