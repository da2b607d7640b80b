import os
import random
import time
from typing import AsyncGenerator, Callable
from unittest.mock import patch

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

# Use in-memory SQLite for testing
# Note: We use check_same_thread=False for SQLite with async
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_JWT_SECRET = "test-jwt-secret-with-at-least-32-bytes!"

# Set test configuration before importing the app
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["SUPABASE_JWT_SECRET"] = TEST_JWT_SECRET


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database with every mapped table."""
    from rockmundo.core.database import create_all

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    from rockmundo.core.database import create_sessionmaker

    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest.fixture
def auth_config():
    from rockmundo.server.core.config import SupabaseAuthConfig

    return SupabaseAuthConfig(jwt_secret=TEST_JWT_SECRET, jwt_audience="authenticated", jwt_algorithm="HS256")


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source shared by the app and the test."""
    return random.Random(1234)


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Build a Supabase-style access token for an auth user id."""

    def _make(sub: str | None, secret: str = TEST_JWT_SECRET, expires_in: int = 3600, **claims) -> str:
        payload = {"aud": "authenticated", "exp": int(time.time()) + expires_in, "role": "authenticated", **claims}
        if sub is not None:
            payload["sub"] = sub
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token) -> Callable[[str], dict]:
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _headers


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, rng: random.Random, auth_config) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from rockmundo.core.database import get_session
    from rockmundo.server.main import app
    from rockmundo.server.services.auth import get_auth_config
    from rockmundo.server.services.deps import get_rng

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_rng] = lambda: rng
    app.dependency_overrides[get_auth_config] = lambda: auth_config

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("rockmundo.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()
