"""Shared test fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from foundershub.main import app
from foundershub.db.base import Base
from foundershub.api.deps import get_db
from foundershub.core.rate_limit import limiter
from foundershub.core.security import create_user_token
from foundershub.services.auth import register_user


# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests(request):
    """Disable rate limiting for all tests except rate limiting tests."""
    limiter.reset()
    if "rate_limit" in request.keywords:
        limiter.enabled = True
        yield
        limiter.reset()
    else:
        limiter.enabled = False
        yield
        limiter.enabled = True


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh database for each test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with a test database."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory that registers users through the auth service."""
    counter = {"n": 0}

    def _make_user(name=None, email=None, password="password123", startup_name="Acme", startup_url=None):
        counter["n"] += 1
        return register_user(
            db_session,
            name=name or f"Founder {counter['n']}",
            email=email or f"founder{counter['n']}@example.com",
            password=password,
            startup_name=startup_name,
            startup_url=startup_url,
        )

    return _make_user


@pytest.fixture
def user(make_user):
    """A registered user."""
    return make_user(name="Ada Lovelace", email="ada@example.com", startup_name="Analytical Engines")


@pytest.fixture
def auth_headers(user):
    """Bearer token headers for ``user``."""
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def headers_for():
    """Build bearer token headers for any user."""
    def _headers_for(some_user):
        return {"Authorization": f"Bearer {create_user_token(some_user)}"}

    return _headers_for
