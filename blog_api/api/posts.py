"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from blog_api.api.dependencies import get_identity, get_post_service
from blog_api.schemas.auth import Identity, MessageResponse
from blog_api.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostMutationResponse,
    PostResponse,
    PostUpdate,
    PostWithAuthor,
)
from blog_api.services.posts import PostService

# Keeps the row offset inside the store's integer range
MAX_PAGE = 1_000_000

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
def get_posts(
    post_service: Annotated[PostService, Depends(get_post_service)],
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="1-indexed page number"),
    limit: int = Query(default=10, ge=1, le=100, description="Posts per page"),
):
    """Get a page of posts, newest first."""
    posts, pagination = post_service.list_posts(page=page, limit=limit)
    return PostListResponse(
        posts=[PostWithAuthor.model_validate(post) for post in posts],
        pagination=pagination,
    )


@router.get("/{post_id}", response_model=PostDetailResponse)
def get_post(
    post_id: int,
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a specific post."""
    post = post_service.get_post(post_id)
    return PostDetailResponse(post=PostWithAuthor.model_validate(post))


@router.post("", response_model=PostMutationResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    identity: Annotated[Identity, Depends(get_identity)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post authored by the current user."""
    post = post_service.create_post(identity, post_data.title, post_data.content)
    return PostMutationResponse(
        message="Post created successfully",
        post=PostResponse.model_validate(post),
    )


@router.put("/{post_id}", response_model=PostMutationResponse)
def update_post(
    post_id: int,
    post_data: PostUpdate,
    identity: Annotated[Identity, Depends(get_identity)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Update a post (author only)."""
    post = post_service.update_post(
        identity, post_id, title=post_data.title, content=post_data.content
    )
    return PostMutationResponse(
        message="Post updated successfully",
        post=PostResponse.model_validate(post),
    )


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    identity: Annotated[Identity, Depends(get_identity)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post (author only)."""
    post_service.delete_post(identity, post_id)
    return MessageResponse(message="Post deleted successfully")
