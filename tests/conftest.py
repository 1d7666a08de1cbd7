"""
Pytest configuration and fixtures for Social Scheduler API tests.
"""
import os

# Keep the application's own engine off disk while tests import it
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from social_scheduler.database import Base, get_db
from social_scheduler.limiter import limiter
from social_scheduler.main import app

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def post(client):
    """A post created through the API."""
    response = client.post("/api/posts", json={"content": "Hello world"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture(scope="function")
def schedule(client, post):
    """A pending Facebook schedule for ``post``."""
    response = client.post(
        "/api/schedules",
        json={
            "post_id": post["id"],
            "platform": "facebook",
            "scheduled_time": "2025-01-01T10:00:00",
        },
    )
    assert response.status_code == 201
    return response.json()
