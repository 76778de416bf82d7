"""Async engine construction shared by the API, the CLI and tests."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **kwargs: Any) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.

    SQLite does not enforce foreign keys unless asked to on every
    connection; ON DELETE CASCADE / SET NULL rely on it.
    """
    kwargs.setdefault("echo", False)
    if not database_url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)

    engine = create_async_engine(database_url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine
