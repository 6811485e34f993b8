from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)

STORE_UNAVAILABLE = "database unavailable"


async def handle_store_error(request: Request, exc: Exception) -> JSONResponse:
    """도큐먼트 저장소 장애는 내부 정보를 감추고 일반 메시지의 5xx 로 응답한다."""

    logger.exception(
        "document store operation failed",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
        },
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": STORE_UNAVAILABLE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PyMongoError, handle_store_error)
