"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from blog_api.config import Settings

Base: Any = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite leaves foreign key enforcement off per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine and session factory built from explicit settings."""

    def __init__(self, settings: Settings):
        url = settings.database_url
        if url.startswith("sqlite"):
            self.engine = create_engine(url, connect_args={"check_same_thread": False})
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        else:
            self.engine = create_engine(url, pool_pre_ping=True, pool_size=5, max_overflow=10)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        """Open a new session."""
        return self.session_factory()

    def create_all(self) -> None:
        """Create all tables known to the models."""
        # Import all models here so they are registered with Base.metadata
        from blog_api import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
