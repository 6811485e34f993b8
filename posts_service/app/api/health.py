from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="서버 동작 확인")
def root() -> str:
    return "APP IS RUNNING."


@router.get("/health", summary="헬스 체크")
def health() -> dict[str, str]:
    return {"status": "ok"}
