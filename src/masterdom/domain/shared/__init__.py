"""Shared domain building blocks."""

from masterdom.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from masterdom.domain.shared.time import utc_now

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "NotFoundError",
    "ValidationError",
    "utc_now",
]
