from enum import Enum


class UserRole(str, Enum):
    """Privilege tier of a user account."""

    USER = "user"
    ADMIN = "admin"
