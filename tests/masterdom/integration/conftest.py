"""
Pytest configuration for integration tests.

These tests run against a PostgreSQL container started through
Testcontainers and are skipped unless ``--run-integration`` is given.
"""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    postgres_url,
)

__all__ = ["async_engine", "db_session", "postgres_container", "postgres_url"]
