"""Application exceptions.

Each exception carries the HTTP status it maps to. The handlers registered in
``blog_api.main`` turn them into ``{"error": message}`` JSON responses.
"""

from fastapi import status


class BlogAPIError(Exception):
    """Base exception for all request-terminating application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        """Convert exception to a dictionary for API responses."""
        return {"error": self.message}


class ValidationError(BlogAPIError):
    """Input failed schema checks."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation error"


class DuplicateEmail(BlogAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class InvalidCredentials(BlogAPIError):
    """Unknown email or wrong password. Both cases share one message."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Unauthorized(BlogAPIError):
    """Missing, malformed or rejected bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidToken(Unauthorized):
    """Token signature is invalid, the token is malformed, or it has expired."""

    default_message = "Invalid token"


class Forbidden(BlogAPIError):
    """Acting identity does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(BlogAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
