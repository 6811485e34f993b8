from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.logger import setup_logger
from common.middleware.request_trace import RequestTraceMiddleware
from common.mongo.client import close_client, get_client

from .api.errors import register_error_handlers
from .api.health import router as health_router
from .api.v1 import api_router
from .auth import security
from .config import get_config


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """필수 설정과 MongoDB 연결을 시작 시점에 검증하고, 종료 시 연결을 닫는다.

    토큰 서명 키 누락이나 연결 실패는 치명적 오류이므로 예외를 그대로 올려 기동을 중단한다.
    """

    try:
        security.jwt_secret()
    except RuntimeError:
        logger.exception("auth settings are incomplete, aborting startup")
        raise

    try:
        get_client()
    except Exception:
        logger.exception("MongoDB did not connect, aborting startup")
        raise

    try:
        yield
    finally:
        close_client()


def create_app() -> FastAPI:
    setup_logger()
    config = get_config()

    app = FastAPI(
        title="Posts Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestTraceMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(api_router)

    return app


app = create_app()


def main() -> None:
    """명령행에서 실행할 수 있도록 uvicorn 런처를 제공한다."""

    import uvicorn

    port = int(os.getenv("POSTS_SERVICE_PORT", "5000"))
    uvicorn.run(
        "posts_service.app.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
        access_log=False,
    )


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
