"""Masterdom Auth - generic authentication primitives.

This package provides authentication building blocks that are independent
of the marketplace domain:
- Password hashing (bcrypt)
- JWT access token creation and verification

Architecture:
    masterdom_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from masterdom_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from masterdom_auth.schemas import TokenPayload
from masterdom_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
