import os
import tempfile
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Tests always run against a throwaway SQLite file, never the configured Postgres
_db_fd, _db_path = tempfile.mkstemp(prefix="test_jobportal_", suffix=".db")
os.close(_db_fd)
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{_db_path}"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from jobportal.config import Settings  # noqa: E402
from jobportal.models.base import Base, SyncSessionLocal, get_session_factory, sync_engine  # noqa: E402
from jobportal.main import app  # noqa: E402
from jobportal.repositories.applications import SqlApplicationRepository  # noqa: E402
from jobportal.repositories.jobs import SqlJobRepository  # noqa: E402
from jobportal.repositories.references import SqlReferenceRepository  # noqa: E402
from jobportal.repositories.saved_jobs import SqlSavedJobRepository  # noqa: E402
from jobportal.repositories.users import SqlUserRepository  # noqa: E402
from jobportal.tests.helpers import NOW  # noqa: E402


def pytest_sessionfinish(session, exitstatus):
    try:
        os.remove(_db_path)
    except FileNotFoundError:
        pass


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        return Settings(database_url=TEST_DATABASE_URL, **overrides)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest_asyncio.fixture
async def sessions():
    # NullPool: every session gets its own connection, nothing is shared across event loops
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest.fixture
def job_repo(sessions):
    return SqlJobRepository(sessions)


@pytest.fixture
def application_repo(sessions):
    return SqlApplicationRepository(sessions)


@pytest.fixture
def saved_job_repo(sessions):
    return SqlSavedJobRepository(sessions)


@pytest.fixture
def reference_repo(sessions):
    return SqlReferenceRepository(sessions)


@pytest.fixture
def user_repo(sessions):
    return SqlUserRepository(sessions)


@pytest.fixture
def db_session():
    """Sync session for seeding data behind the API."""
    Base.metadata.create_all(bind=sync_engine)
    db = SyncSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=sync_engine)


@pytest.fixture
def client(db_session):
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    test_sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session_factory():
        yield test_sessions

    app.dependency_overrides[get_session_factory] = override_get_session_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
