"""Shared utilities for SQLAlchemy repositories."""

import sqlite3

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """
    Tell whether an IntegrityError came from a UNIQUE constraint.

    Only the driver error is inspected, never the rendered statement or
    its parameters. PostgreSQL reports SQLSTATE 23505; SQLite prefixes
    its message with "UNIQUE constraint failed".
    """
    driver_error = error.orig
    sqlstate = getattr(driver_error, "sqlstate", None) or getattr(
        driver_error,
        "pgcode",
        None,
    )
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    if isinstance(driver_error, sqlite3.IntegrityError):
        return str(driver_error).startswith("UNIQUE constraint failed")
    return False
