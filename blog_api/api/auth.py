"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blog_api.api.dependencies import get_identity, get_token_service
from blog_api.database import get_db
from blog_api.schemas.auth import (
    AuthResponse,
    Identity,
    MessageResponse,
    ProfileResponse,
    ProfileUser,
    UserLogin,
    UserRegister,
    UserResponse,
)
from blog_api.services.auth import TokenService, authenticate_user, create_user, get_profile

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user."""
    user = create_user(db, user_data.email, user_data.password, user_data.name)
    token = token_service.issue(Identity(user_id=user.id, email=user.email))

    return AuthResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/signin", response_model=AuthResponse)
def signin(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    token = token_service.issue(Identity(user_id=user.id, email=user.email))

    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/signout", response_model=MessageResponse)
def signout(
    identity: Annotated[Identity, Depends(get_identity)],
):
    """Logout (client should discard token)."""
    return MessageResponse(message="Signed out successfully")


@router.get("/profile", response_model=ProfileResponse)
def profile(
    identity: Annotated[Identity, Depends(get_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    user = get_profile(db, identity)
    return ProfileResponse(user=ProfileUser.model_validate(user))
