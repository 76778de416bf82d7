"""
Pytest configuration for persistence tests.

Each test runs against its own file-backed SQLite database with foreign
keys enforced, so cascades and unique constraints behave as in production.
"""

from tests.shared.fixtures.database import sqlite_engine, sqlite_session

__all__ = ["sqlite_engine", "sqlite_session"]
