import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool
from typing import AsyncGenerator

# Configure database for tests via settings module rather than hardcoding directly.
# The module-level engine in forumserver.db.session is built on import, so the
# URL must be in place before anything from forumserver is imported.
test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_URL", test_db_url)

from forumserver.core import config as _config  # noqa: E402
_config.get_settings.cache_clear()  # ensure new env vars are picked up # type: ignore[attr-defined]
_settings = _config.get_settings()

from forumserver.api import deps  # noqa: E402
from forumserver.api.main import app  # noqa: E402
from forumserver.db.session import build_engine, build_sessionmaker, ensure_schema  # noqa: E402
from forumserver.services.content import ContentService  # noqa: E402


@pytest.fixture(scope="session")
def settings():
    """Expose application settings to tests if needed."""
    return _settings


@pytest_asyncio.fixture()
async def engine():
    """A fresh in-memory database per test, shared by every session of that test."""
    eng = build_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await ensure_schema(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture()
async def sessions(engine):
    return build_sessionmaker(engine)


@pytest_asyncio.fixture()
async def db_session(sessions) -> AsyncGenerator[AsyncSession, None]:
    async with sessions() as session:  # type: ignore
        yield session


@pytest_asyncio.fixture()
async def service(engine, sessions) -> ContentService:
    return await ContentService.start(engine, sessions, auto_migrate=False)


@pytest_asyncio.fixture()
async def client(service, sessions):
    async def _get_db():
        async with sessions() as session:
            yield session

    app.dependency_overrides[deps.get_content_service] = lambda: service
    app.dependency_overrides[deps.get_db] = _get_db
    # httpx >=0.28 removed the 'app=' shortcut; use ASGITransport explicitly
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
