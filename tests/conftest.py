"""
Test infrastructure for the News API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no Postgres instance is needed.
- StaticPool makes every session share the one in-memory connection;
  SQLite in-memory databases are connection-scoped.
- ``build_engine`` issues ``PRAGMA foreign_keys=ON`` on connect so the referential
  integrity rules match the production database.
- The app's get_db dependency is overridden with the test session factory.
- Before each test the schema is recreated and the fixture dataset from
  ``news_api.seed_data`` is loaded, so every test starts from the same
  known state (article 1 has 100 votes and 11 comments, article 2 has none).
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from news_api.database import Base, build_engine, build_session_factory, get_db
from news_api.main import app
from news_api.seed_data import TEST_DATA
from news_api.seeding import reset_schema, seed

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = build_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
async_session_test = build_session_factory(engine_test)


# ---------------------------------------------------------------------------
# Dependency override
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def seeded_db():
    """Recreate all tables and load the fixture dataset before each test."""
    async with engine_test.begin() as conn:
        await reset_schema(conn)
    async with async_session_test() as session:
        await seed(session, TEST_DATA)
        await session.commit()
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """
    Yield a live AsyncSession for tests that call service functions
    directly instead of going through HTTP.
    """
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
