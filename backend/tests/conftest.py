"""
Test configuration and fixtures for the dashboard backend tests.
"""
import os

# Point the application at the test database before it is imported
TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("APP_ENV", "test")

import pytest_asyncio
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from buffalo_dashboard.main import app
from buffalo_dashboard.core.config import Settings, get_settings
from buffalo_dashboard.core.security import get_password_hash, create_access_token
from buffalo_dashboard.db.base import Base, get_db
from buffalo_dashboard.models import Admin, ButtonLink, LinkType

ADMIN_PASSWORD = "TestPass123"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    # Clean up test database file
    try:
        os.remove("./test.db")
    except OSError:
        pass


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with database session override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def restricted_client(client: AsyncClient) -> AsyncClient:
    """Test client for an app running in restricted mode."""
    app.dependency_overrides[get_settings] = lambda: Settings(RESTRICTED_MODE=True)
    return client


@pytest_asyncio.fixture
async def test_admin(db_session: AsyncSession) -> Admin:
    """Create a test admin."""
    admin = Admin(
        username="testadmin",
        password_hash=get_password_hash(ADMIN_PASSWORD),
    )
    db_session.add(admin)
    await db_session.flush()
    return admin


@pytest_asyncio.fixture
async def admin_token(test_admin: Admin) -> str:
    """Create an access token for the test admin."""
    return create_access_token(subject=test_admin.id)


@pytest_asyncio.fixture
async def auth_headers(admin_token: str) -> dict:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest_asyncio.fixture
async def telegram_button(db_session: AsyncSession) -> ButtonLink:
    """Create the seeded Telegram link."""
    button = ButtonLink(
        name="Telegram Link",
        url="https://t.me/blahblah",
        icon="send",
        description="Contact us on Telegram",
        link_type=LinkType.REDIRECT,
        is_active=True,
        order=1,
    )
    db_session.add(button)
    await db_session.flush()
    return button
