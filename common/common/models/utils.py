from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def normalize_id_fields_to_str(data: Any, *, fields: list[str]) -> Any:
    """ObjectId 등으로 들어온 식별자 필드를 문자열로 바꾼다.

    Mongo 에서 읽은 raw dict 는 ``_id`` 를 사용하므로 ``id`` 로도 옮겨 준다.
    """

    if not isinstance(data, Mapping):
        return data

    changed = False
    result: dict[str, Any] = dict(data)
    if "_id" in result and "id" in fields and result.get("id") is None:
        result["id"] = result.pop("_id")
        changed = True

    for field in fields:
        value = result.get(field)
        if value is None or isinstance(value, str):
            continue
        result[field] = str(value)
        changed = True

    if not changed:
        return data

    return result
