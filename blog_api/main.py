"""FastAPI application entry point.

Run with ``uvicorn blog_api.main:create_app --factory``.
"""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.api import auth, posts
from blog_api.config import Settings, get_settings
from blog_api.database import Database
from blog_api.exceptions import BlogAPIError, ValidationError
from blog_api.services.auth import TokenService

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    database: Database = app.state.database
    database.create_all()
    yield
    database.dispose()


async def blog_api_error_handler(request: Request, exc: BlogAPIError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(exc.to_dict(), status_code=exc.status_code, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError()
    body = error.to_dict()
    body["details"] = jsonable_encoder(exc.errors())
    return JSONResponse(body, status_code=error.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Raised by routing itself; application errors are BlogAPIError
    message = "Route not found" if exc.status_code == 404 else exc.detail
    return JSONResponse({"error": message}, status_code=exc.status_code, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        {"error": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The settings object is the only configuration source; the database and
    token service built from it are shared read-only across requests.
    """
    settings = settings or get_settings()
    logging.getLogger("blog_api").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Blog API",
        description="User accounts and blog posts with bearer-token auth",
        version=API_VERSION,
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.token_service = TokenService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(BlogAPIError, blog_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routers
    app.include_router(auth.router)
    app.include_router(posts.router)

    @app.get("/")
    async def root():
        """API banner."""
        return {
            "message": "API is running",
            "version": API_VERSION,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        return {"status": "healthy", "environment": request.app.state.settings.environment}

    logger.info(f"Blog API configured for {settings.environment}")
    return app
