"""
Study Tracker - Test Configuration
Pytest fixtures and configuration for testing
"""
import os
from collections.abc import AsyncGenerator
from typing import Any

# Point the application engine at SQLite before the app is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import study_tracker.models  # noqa: F401
from study_tracker.core.database import Base, get_db
from study_tracker.core.security import get_password_hash
from study_tracker.main import app
from study_tracker.models.curriculum import Subject, Topic
from study_tracker.models.user import User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """A private in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with database session override."""
    
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user_data() -> dict[str, Any]:
    """Sample user registration data."""
    return {
        "email": "test@example.com",
        "password": "TestPass123!",
        "first_name": "Test",
        "last_name": "User",
    }


async def _register_and_login(client: AsyncClient, user_data: dict[str, Any]) -> dict[str, str]:
    await client.post("/api/v1/auth/register", json=user_data)
    response = await client.post("/api/v1/auth/login", json={
        "email": user_data["email"],
        "password": user_data["password"],
    })
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest_asyncio.fixture
async def auth_headers(client: AsyncClient, sample_user_data) -> dict[str, str]:
    """Bearer headers for a registered user."""
    return await _register_and_login(client, sample_user_data)


@pytest_asyncio.fixture
async def other_auth_headers(client: AsyncClient) -> dict[str, str]:
    """Bearer headers for a second, unrelated user."""
    return await _register_and_login(client, {
        "email": "other@example.com",
        "password": "OtherPass456!",
        "first_name": "Other",
        "last_name": "User",
    })


# ============================================================================
# Service-level fixtures (no HTTP)
# ============================================================================

async def _make_user(db: AsyncSession, email: str) -> User:
    user = User(
        email=email,
        hashed_password=get_password_hash("Password123"),
        first_name="Test",
        last_name="User",
    )
    db.add(user)
    await db.flush()
    return user


@pytest_asyncio.fixture
async def user(db_session: AsyncSession) -> User:
    return await _make_user(db_session, "alice@example.com")


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    return await _make_user(db_session, "bob@example.com")


async def make_topic(db: AsyncSession, owner: User, name: str = "Kinematics") -> Topic:
    """A topic under a fresh subject owned by `owner`."""
    subject = Subject(user_id=owner.id, name="Physics", type="A-Level")
    db.add(subject)
    await db.flush()
    topic = Topic(subject_id=subject.id, name=name)
    db.add(topic)
    await db.flush()
    return topic


@pytest_asyncio.fixture
async def topic(db_session: AsyncSession, user: User) -> Topic:
    return await make_topic(db_session, user)


@pytest_asyncio.fixture
async def other_topic(db_session: AsyncSession, other_user: User) -> Topic:
    return await make_topic(db_session, other_user, name="Organic Chemistry")
