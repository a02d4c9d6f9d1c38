"""
DragNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment overrides are applied BEFORE any dragnotes import so the
       settings singleton never sees production values.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session (no database)
    ├── db_engine / session_factory / db_session: in-memory SQLite
    ├── hasher / token_service: fast, deterministic auth collaborators
    ├── make_user / auth_context: persisted users for service tests
    └── test_client: HTTPX AsyncClient bound to the app, sessions from
        the in-memory database
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"  # passlib minimum; keeps hashing fast
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from dragnotes.database import Base, get_db_session  # noqa: E402
from dragnotes.models.note import Note  # noqa: E402,F401
from dragnotes.models.user import User  # noqa: E402
from dragnotes.services.access_guard import AuthContext  # noqa: E402
from dragnotes.services.password_hasher import PasswordHasher  # noqa: E402
from dragnotes.services.token_service import TokenService  # noqa: E402

TEST_SECRET = "test-secret-not-for-production"


# ══════════════════════════════════════════════════════════════════════════
# Mocks
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """A fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Auth collaborators
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(secret=TEST_SECRET, algorithm="HS256", expires_in=86_400)


@pytest.fixture
def make_user(db_session):
    """Factory persisting a user directly (no hashing cost)."""
    counter = {"n": 0}

    async def _make(email=None, username=None):
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@example.com",
            username=username,
            password_hash="not-a-real-hash",
        )
        db_session.add(user)
        await db_session.flush()
        return user

    return _make


@pytest_asyncio.fixture
async def auth_context(make_user):
    user = await make_user(email="owner@example.com")
    return AuthContext(user_id=user.id, user=user)


# ══════════════════════════════════════════════════════════════════════════
# HTTP
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from dragnotes.main import app

    async def _override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_db_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


async def signup_and_login(client, email="a@x.com", password="secret1", username=None):
    """Register a user over HTTP and return (user_id, auth headers)."""
    payload = {"email": email, "password": password}
    if username is not None:
        payload["username"] = username
    signup = await client.post("/api/auth/signup", json=payload)
    assert signup.status_code == 201, signup.text
    login = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert login.status_code == 200, login.text
    token = login.json()["token"]
    return signup.json()["userId"], {"Authorization": f"Bearer {token}"}
