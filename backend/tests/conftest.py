"""
Pytest configuration and fixtures for the test suite.
"""
import os
import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Set test environment before importing app
os.environ["ENV"] = "development"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-testing-purposes-only-32chars"
os.environ.setdefault("DATABASE_URL", "sqlite://")

from slidedeck.main import app
from slidedeck.models import Base
from slidedeck.core.deps import get_db
from slidedeck.models.user import User
from slidedeck.models.presentation import Presentation
from slidedeck.models.slide import Slide
from slidedeck.services.auth import create_access_token


# Use SQLite for testing (in-memory, one shared connection)
SQLALCHEMY_TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")

if "sqlite" in SQLALCHEMY_TEST_DATABASE_URL:
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(SQLALCHEMY_TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database override."""

    def override_get_db_with_session():
        """Return the test database session."""
        yield db

    app.dependency_overrides[get_db] = override_get_db_with_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _make_user(db: Session, username: str, display_name: str) -> User:
    user = User(
        username=username,
        display_name=display_name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _auth_headers_for(user: User) -> dict:
    token = create_access_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_user(db: Session) -> User:
    """Create a test user."""
    return _make_user(db, "testuser", "Test User")


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    """Create authentication headers for test user."""
    return _auth_headers_for(test_user)


@pytest.fixture
def authenticated_client(client: TestClient, auth_headers: dict) -> TestClient:
    """Create an authenticated test client."""
    client.headers.update(auth_headers)
    return client


@pytest.fixture
def other_user(db: Session) -> User:
    """Create another test user."""
    return _make_user(db, "otheruser", "Other User")


@pytest.fixture
def other_auth_headers(other_user: User) -> dict:
    """Create authentication headers for the other user."""
    return _auth_headers_for(other_user)


@pytest.fixture
def test_presentation(db: Session, test_user: User) -> Presentation:
    """Create a test presentation for the test user."""
    presentation = Presentation(
        title="Test Presentation",
        description="A test presentation for testing",
        theme="minimal",
        aspect_ratio="16:9",
        slide_count=0,
        user_id=test_user.id,
    )
    db.add(presentation)
    db.commit()
    db.refresh(presentation)
    return presentation


@pytest.fixture
def other_user_presentation(db: Session, other_user: User) -> Presentation:
    """Create a presentation owned by another user."""
    presentation = Presentation(
        title="Other User's Presentation",
        slide_count=0,
        user_id=other_user.id,
    )
    db.add(presentation)
    db.commit()
    db.refresh(presentation)
    return presentation


@pytest.fixture
def test_slide(db: Session, test_presentation: Presentation) -> Slide:
    """Create a slide in the test presentation."""
    slide = Slide(
        presentation_id=test_presentation.id,
        order_index=1,
        layout_type="title",
        title="Opening",
        content="Welcome",
    )
    db.add(slide)
    test_presentation.slide_count = 1
    db.commit()
    db.refresh(slide)
    return slide
