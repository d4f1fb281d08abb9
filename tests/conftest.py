import os
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

ENV_TEST_PATH = Path(__file__).parents[1] / ".env.test"


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key, value)


_load_env_file(ENV_TEST_PATH)

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

from yasinga.config import settings  # noqa: E402
from yasinga.db.session import get_db  # noqa: E402
from yasinga.main import app  # noqa: E402


def _make_engine():
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared in-memory database for every connection of the engine.
        return create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(TEST_DATABASE_URL, echo=False)


@pytest.fixture(scope="function")
async def setup_database():
    """Create tables for tests that need the database, and drop them after.

    Not autouse, so pure unit tests (classifier, aggregator) run without a
    database.
    """
    from yasinga.models.base import Base

    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(setup_database):
    """Provide test database session with fresh connection per test."""
    async with setup_database() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user for authentication tests."""
    from yasinga.core.security import hash_password
    from yasinga.models.user import User
    from yasinga.repositories.user import UserRepository

    repo = UserRepository(db_session)
    user = User(
        email="owner@example.com",
        password_hash=hash_password("password123"),
        first_name="Wanjiku",
        last_name="Kamau",
        business_phone_number="+254712345678",
    )
    return await repo.create(user)


@pytest.fixture
async def other_user(db_session: AsyncSession):
    """A second account, for ownership checks."""
    from yasinga.models.user import User
    from yasinga.repositories.user import UserRepository

    return await UserRepository(db_session).create(
        User(email="other@example.com", password_hash="not-a-real-hash")
    )


@pytest.fixture
async def auth_headers(test_user):
    """Provide authentication headers with valid JWT token."""
    from yasinga.core.security import create_access_token

    token = create_access_token(user_id=test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_auth_headers(other_user):
    from yasinga.core.security import create_access_token

    return {"Authorization": f"Bearer {create_access_token(user_id=other_user.id)}"}


@pytest.fixture
def reports_dir(tmp_path, monkeypatch):
    """Point saved reports at a throwaway directory."""
    directory = tmp_path / "reports"
    monkeypatch.setattr(settings, "reports_dir", directory)
    return directory


@pytest.fixture
async def client(db_session: AsyncSession):
    """Provide test client with database override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
