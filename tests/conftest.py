"""Pytest configuration and fixtures."""

import os
import shutil
import tempfile

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"].replace("/design_studio", "/design_studio_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

TEST_UPLOAD_DIR = tempfile.mkdtemp(prefix="design-studio-uploads-")

# Settings are cached on first use, so the environment must be ready before
# the application is imported.
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["UPLOAD_DIR"] = TEST_UPLOAD_DIR
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from design_studio.database import Base, engine, get_db  # noqa: E402
from design_studio.main import app  # noqa: E402

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    shutil.rmtree(TEST_UPLOAD_DIR, ignore_errors=True)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    response = client.post(
        "/auth/signup",
        json={"name": "Test User", "email": "test@example.com", "password": "testpass123"},
    )
    assert response.status_code == 201
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )
