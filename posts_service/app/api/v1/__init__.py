from fastapi import APIRouter

from .posts import router as posts_router
from .users import router as users_router

api_router = APIRouter()
api_router.include_router(posts_router, prefix="/posts", tags=["posts"])
api_router.include_router(users_router, prefix="/user", tags=["user"])
