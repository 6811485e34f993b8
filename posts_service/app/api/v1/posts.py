from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from common.models.post import (
    ListPostsFilter,
    PostCreateInput,
    PostUpdateInput,
    SearchPostsFilter,
)

from ...config import AppConfig, MAX_PAGE_SIZE, get_config
from ...services.posts_service import PostsService, get_posts_service
from ..deps import get_current_user_id
from ..schemas.common import MessageResponse, PaginatedResponse
from ..schemas.posts import (
    CommentRequest,
    ListPostsResponse,
    PostCreateRequest,
    PostResponse,
    PostUpdateRequest,
)


router = APIRouter()

POST_NOT_FOUND = "post not found"


@router.get(
    "",
    response_model=PaginatedResponse[PostResponse],
    summary="포스트 목록 조회",
    description="최신순으로 정렬된 포스트 목록을 페이지네이션하여 반환한다.",
)
def list_posts(
    page: int = Query(1, ge=1, description="조회할 페이지 (1부터 시작)"),
    page_size: Optional[int] = Query(
        default=None,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="페이지당 아이템 개수 (기본값은 설정 파일의 posts.page_size)",
    ),
    service: PostsService = Depends(get_posts_service),
    config: AppConfig = Depends(get_config),
) -> PaginatedResponse[PostResponse]:
    size = page_size or config.posts.page_size
    items, total = service.list_posts(ListPostsFilter(page=page, page_size=size))
    return PaginatedResponse[PostResponse](
        items=[PostResponse.from_domain(post) for post in items],
        total=total,
        page=page,
        page_size=size,
        number_of_pages=PaginatedResponse.count_pages(total, size),
    )


@router.get(
    "/search",
    response_model=ListPostsResponse,
    summary="포스트 검색",
    description="제목(부분 일치, 대소문자 무시) 또는 태그(쉼표 구분) 중 하나라도 일치하는 포스트를 반환한다.",
)
def search_posts(
    search_query: Optional[str] = Query(default=None, description="제목 검색어"),
    tags: Optional[str] = Query(default=None, description="쉼표로 구분한 태그 목록"),
    service: PostsService = Depends(get_posts_service),
) -> ListPostsResponse:
    flt = SearchPostsFilter(
        search_query=search_query,
        tags=(tags or "").split(","),
    )
    posts = service.search_posts(flt)
    return ListPostsResponse(
        total=len(posts),
        items=[PostResponse.from_domain(post) for post in posts],
    )


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="단일 포스트 조회",
)
def get_post(
    post_id: str,
    service: PostsService = Depends(get_posts_service),
) -> PostResponse:
    post = service.get_post(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return PostResponse.from_domain(post)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="포스트 생성",
)
def create_post(
    body: PostCreateRequest,
    user_id: str = Depends(get_current_user_id),
    service: PostsService = Depends(get_posts_service),
) -> PostResponse:
    input_model = PostCreateInput(creator=user_id, **body.model_dump())
    post = service.create_post(input_model)
    return PostResponse.from_domain(post)


@router.patch(
    "/{post_id}",
    response_model=PostResponse,
    summary="포스트 부분 수정",
)
def update_post(
    post_id: str,
    body: PostUpdateRequest,
    _user_id: str = Depends(get_current_user_id),
    service: PostsService = Depends(get_posts_service),
) -> PostResponse:
    input_model = PostUpdateInput(**body.model_dump(exclude_none=True))
    post = service.update_post(post_id, input_model)
    if post is None:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return PostResponse.from_domain(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="포스트 삭제",
)
def delete_post(
    post_id: str,
    _user_id: str = Depends(get_current_user_id),
    service: PostsService = Depends(get_posts_service),
) -> MessageResponse:
    if not service.delete_post(post_id):
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return MessageResponse(message="post deleted successfully")


@router.patch(
    "/{post_id}/likeCount",
    response_model=PostResponse,
    summary="포스트 좋아요 토글",
    description="요청한 유저가 이미 좋아요를 눌렀으면 취소하고, 아니면 추가한다.",
)
def like_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostsService = Depends(get_posts_service),
) -> PostResponse:
    post = service.like_post(post_id, user_id)
    if post is None:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return PostResponse.from_domain(post)


@router.post(
    "/{post_id}/comments",
    response_model=PostResponse,
    summary="포스트 댓글 추가",
)
def comment_post(
    post_id: str,
    body: CommentRequest,
    _user_id: str = Depends(get_current_user_id),
    service: PostsService = Depends(get_posts_service),
) -> PostResponse:
    post = service.comment_post(post_id, body.value)
    if post is None:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return PostResponse.from_domain(post)
