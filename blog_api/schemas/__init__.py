"""Pydantic schemas for API requests and responses."""

from blog_api.schemas.auth import (
    AuthResponse,
    Identity,
    MessageResponse,
    ProfileResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from blog_api.schemas.post import (
    Pagination,
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostMutationResponse,
    PostResponse,
    PostUpdate,
    PostWithAuthor,
)

__all__ = [
    "Identity",
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "ProfileResponse",
    "MessageResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostWithAuthor",
    "Pagination",
    "PostListResponse",
    "PostDetailResponse",
    "PostMutationResponse",
]
