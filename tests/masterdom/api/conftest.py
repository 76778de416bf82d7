"""
Pytest configuration for API tests.

The app is built with ``create_app`` and talks to a file-backed SQLite
database per test through dependency overrides. The lifespan is not
run, so the schema is created up front.
"""

import asyncio
from typing import Callable
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from masterdom.infrastructure.persistence.sqlalchemy.engine import build_engine
from masterdom.infrastructure.persistence.sqlalchemy.init_db import create_tables
from masterdom.presentation.api.app import create_app
from masterdom.presentation.api.config import get_api_settings
from masterdom.presentation.api.dependencies import get_db_session
from masterdom_config.settings import Settings
from tests.masterdom.api.helpers import (
    SUPER_ADMIN_EMAIL,
    Actor,
    login,
    register,
)


@pytest.fixture
def database_url(tmp_path) -> str:
    """SQLite file with the full schema in place."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"

    async def _create() -> None:
        engine = build_engine(url, poolclass=NullPool)
        await create_tables(engine)
        await engine.dispose()

    asyncio.run(_create())
    return url


@pytest.fixture
def api_settings(database_url) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr("api-test-secret-key-with-enough-entropy-123"),
        postgres_password=SecretStr("test-password"),
        database_url_override=database_url,
        api_debug=True,
        bcrypt_rounds=4,
        super_admin_email=SUPER_ADMIN_EMAIL,
    )


@pytest.fixture
def client(api_settings) -> TestClient:
    """TestClient wired to the per-test database and settings."""
    engine = build_engine(api_settings.database_url, poolclass=NullPool)
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app = create_app(settings=api_settings)
    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    return TestClient(app)


@pytest.fixture
def signup(client) -> Callable[..., Actor]:
    """Register a user and log them in."""

    def _signup(email: str, first_name: str = "Test", **profile) -> Actor:
        response = register(client, email, first_name, **profile)
        assert response.status_code == 201, response.text
        return Actor(
            user_id=UUID(response.json()["user_id"]),
            email=email,
            headers=login(client, email),
        )

    return _signup


@pytest.fixture
def anna(signup) -> Actor:
    return signup("anna@example.com", "Anna")


@pytest.fixture
def boris(signup) -> Actor:
    return signup("boris@example.com", "Boris")


@pytest.fixture
def root(signup) -> Actor:
    """The configured super-admin; admin from registration on."""
    return signup(SUPER_ADMIN_EMAIL, "Root")


