"""Pytest configuration and fixtures."""

import os
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from eventsapp.database import Base, get_db
from eventsapp.main import app
from eventsapp.models import Event, User, UserRole
from eventsapp.services.auth import issue_token
from eventsapp.services.security import get_password_hash

DEFAULT_PASSWORD = "secret12"


class AuthHeaders(dict):
    """Dict subclass that also stores the user behind the token."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL when DATABASE_URL points at one, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    url = make_url(os.environ["DATABASE_URL"])
    SQLALCHEMY_DATABASE_URL = url.set(database=f"{url.database}_test").render_as_string(
        hide_password=False
    )
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


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
def make_user(db):
    """Factory that inserts a user directly and returns it."""

    def _make_user(
        email: str,
        role: UserRole = UserRole.ATTENDEE,
        name: str | None = None,
        password: str = DEFAULT_PASSWORD,
    ) -> User:
        user = User(
            email=email,
            password_hash=get_password_hash(password),
            name=name or email.split("@")[0].title(),
            role=role.value,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_event(db):
    """Factory that inserts an event directly and returns it."""

    def _make_event(title: str = "Tech Conference", **overrides) -> Event:
        values = {
            "title": title,
            "description": "A day of talks about the web.",
            "date": datetime(2026, 11, 15, 10, 0, tzinfo=UTC),
            "location": "Convention Center",
            "capacity": 100,
            "email": "owner@example.com",
        }
        values.update(overrides)
        event = Event(**values)
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    return _make_event


def headers_for(user: User) -> AuthHeaders:
    """Bearer headers for ``user``."""
    return AuthHeaders(
        {"Authorization": f"Bearer {issue_token(user)}"},
        user_id=user.id,
        email=user.email,
    )


@pytest.fixture
def admin_headers(make_user):
    """Auth headers for an admin."""
    return headers_for(make_user("admin@example.com", UserRole.ADMIN, name="Admin"))


@pytest.fixture
def organizer_headers(make_user):
    """Auth headers for an organizer."""
    return headers_for(make_user("organizer@example.com", UserRole.ORGANIZER, name="Organizer"))


@pytest.fixture
def attendee_headers(make_user):
    """Auth headers for an attendee."""
    return headers_for(make_user("attendee@example.com", UserRole.ATTENDEE, name="Attendee"))
