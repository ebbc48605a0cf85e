"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Identity(BaseModel):
    """Acting user recovered from a verified token."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    email: str


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., min_length=2, max_length=255)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class ProfileUser(UserResponse):
    created_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    message: str
    user: UserResponse
    token: str


class ProfileResponse(BaseModel):
    user: ProfileUser


class MessageResponse(BaseModel):
    message: str
