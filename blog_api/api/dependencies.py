"""FastAPI dependencies for authentication and services."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blog_api.database import get_db
from blog_api.exceptions import InvalidToken, Unauthorized
from blog_api.schemas.auth import Identity
from blog_api.services.auth import TokenService
from blog_api.services.posts import PostService

logger = logging.getLogger(__name__)

# Missing header and wrong scheme are both reported by get_identity, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    """Get the token service configured for this application."""
    return request.app.state.token_service


def get_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Get the acting identity from the bearer token.

    No header or a non-Bearer scheme is rejected before verification; a token
    that fails verification is rejected afterwards. Both are 401.
    """
    if credentials is None:
        raise Unauthorized("Unauthorized - No token provided")

    try:
        return token_service.verify(credentials.credentials)
    except InvalidToken as e:
        logger.warning("Rejected bearer token")
        raise Unauthorized("Unauthorized - Invalid token") from e


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(db)
