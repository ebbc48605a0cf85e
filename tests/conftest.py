"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import make_url

from blog_api.config import Settings
from blog_api.database import Base, get_db
from blog_api.main import create_app
from blog_api.services.auth import TokenService


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = (
        make_url(os.getenv("DATABASE_URL")).set(database="blog_test").render_as_string(False)
    )
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

TEST_SETTINGS = Settings(
    _env_file=None,
    database_url=SQLALCHEMY_DATABASE_URL,
    jwt_secret="test-secret-key",
    environment="test",
)

test_app = create_app(TEST_SETTINGS)
database = test_app.state.database


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    database.create_all()
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def app():
    return test_app


@pytest.fixture
def token_service() -> TokenService:
    return test_app.state.token_service


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


def register(client, email: str, name: str, password: str = "testpass123") -> AuthHeaders:
    """Register a user and return bearer headers for it."""
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def register_user(client):
    """Register users on demand."""

    def _register(email: str, name: str, password: str = "testpass123") -> AuthHeaders:
        return register(client, email, name, password)

    return _register


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com", "Test User")


@pytest.fixture
def other_auth_headers(client):
    """A second user, for ownership checks."""
    return register(client, "other@example.com", "Other User")


@pytest.fixture
def post_factory(client):
    """Create posts through the API."""

    def _create(headers, title: str = "A post title", content: str = "Some post content here."):
        response = client.post(
            "/api/posts", headers=headers, json={"title": title, "content": content}
        )
        assert response.status_code == 201
        return response.json()["post"]

    return _create
