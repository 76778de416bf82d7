"""Tests for the operator CLI."""

import asyncio

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from typer.testing import CliRunner

from masterdom.infrastructure.persistence.sqlalchemy.engine import build_engine
from masterdom.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from masterdom.presentation.cli.app import app
from masterdom_config.settings import clear_settings_cache
from tests.shared.fixtures.seed import seed_user

runner = CliRunner()


@pytest.fixture
def database_url(tmp_path, monkeypatch) -> str:
    """Point the CLI at a throwaway SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL_OVERRIDE", url)
    clear_settings_cache()
    return url


def _run(url: str, work):
    async def _inner():
        engine = build_engine(url, poolclass=NullPool)
        try:
            async with async_sessionmaker(engine, class_=AsyncSession)() as session:
                result = await work(session)
                await session.commit()
                return result
        finally:
            await engine.dispose()

    return asyncio.run(_inner())


def _table_names(url: str) -> set[str]:
    async def _inner():
        engine = build_engine(url, poolclass=NullPool)
        try:
            async with engine.connect() as conn:
                return set(
                    await conn.run_sync(lambda c: inspect(c).get_table_names()),
                )
        finally:
            await engine.dispose()

    return asyncio.run(_inner())


class TestSecrets:
    def test_generate_prints_both_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output
        assert "POSTGRES_PASSWORD=" in result.output


class TestDatabase:
    def test_init_creates_tables(self, database_url):
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        assert {"users", "offers", "conversations"} <= _table_names(database_url)

    def test_drop_asks_for_confirmation(self, database_url):
        runner.invoke(app, ["db", "init"])

        result = runner.invoke(app, ["db", "drop"], input="n\n")

        assert result.exit_code == 1
        assert "users" in _table_names(database_url)

    def test_drop_with_force(self, database_url):
        runner.invoke(app, ["db", "init"])

        result = runner.invoke(app, ["db", "drop", "--force"])

        assert result.exit_code == 0
        assert _table_names(database_url) == set()


class TestPromote:
    def test_promotes_registered_user(self, database_url):
        runner.invoke(app, ["db", "init"])
        _run(database_url, lambda s: seed_user(s, "anna@example.com", "Anna"))

        result = runner.invoke(app, ["admin", "promote", "anna@example.com"])

        assert result.exit_code == 0
        assert "anna@example.com is now an admin" in result.output
        user = _run(
            database_url,
            lambda s: UserRepositorySQLAlchemy(s).find_by_email("anna@example.com"),
        )
        assert user.is_admin

    def test_unknown_email(self, database_url):
        runner.invoke(app, ["db", "init"])

        result = runner.invoke(app, ["admin", "promote", "ghost@example.com"])

        assert result.exit_code == 1
        assert "Error:" in result.output
