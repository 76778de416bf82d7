"""
Database fixtures for persistence and integration tests.

Two flavours share one shape:
- ``sqlite_session``: a file-backed SQLite database per test (fast, default)
- ``db_session``: an ephemeral Testcontainers PostgreSQL (integration only)

Usage:
    # In your conftest.py
    from tests.shared.fixtures.database import sqlite_engine, sqlite_session

    async def test_something(sqlite_session):
        repo = SomeRepository(sqlite_session)
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

# Import models to register them with Base.metadata
import masterdom.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from masterdom.infrastructure.persistence.sqlalchemy.engine import build_engine
from masterdom.infrastructure.persistence.sqlalchemy.models.base import Base

# Use same Postgres major version as production
POSTGRES_IMAGE = "postgres:18-alpine"


def _session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# -----------------------------------------------------------------------------
# SQLite
# -----------------------------------------------------------------------------


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """File-backed SQLite engine with a fresh schema."""
    engine = build_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'masterdom.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine):
    """Provide an isolated session on the per-test SQLite database."""
    async with _session_maker(sqlite_engine)() as session:
        yield session
        await session.rollback()


# -----------------------------------------------------------------------------
# PostgreSQL (Testcontainers)
# -----------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session; each test
    gets a clean schema via drop/create.
    """
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_url(postgres_container) -> str:
    """Connection URL of the container in asyncpg format."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://",
        "postgresql+asyncpg://",
    )
    return async_url.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture
async def async_engine(postgres_url):
    """Engine on the container with a clean schema for each test."""
    engine = build_engine(postgres_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Provide an isolated session on the PostgreSQL container."""
    async with _session_maker(async_engine)() as session:
        yield session
        await session.rollback()
