"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Create a new post."""

    title: str = Field(..., min_length=3, max_length=255)
    content: str = Field(..., min_length=10)


class PostUpdate(BaseModel):
    """Update a post. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=3, max_length=255)
    content: str | None = Field(None, min_length=10)


class PostResponse(BaseModel):
    """Post response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    user_id: int
    created_at: datetime
    updated_at: datetime


class PostWithAuthor(PostResponse):
    """Post joined with its author's public fields."""

    author_name: str
    author_email: str


class Pagination(BaseModel):
    current_page: int = Field(..., serialization_alias="currentPage")
    total_pages: int = Field(..., serialization_alias="totalPages")
    total_posts: int = Field(..., serialization_alias="totalPosts")
    limit: int


class PostListResponse(BaseModel):
    posts: list[PostWithAuthor]
    pagination: Pagination


class PostDetailResponse(BaseModel):
    post: PostWithAuthor


class PostMutationResponse(BaseModel):
    """Response for create and update."""

    message: str
    post: PostResponse
