"""User domain: identity, role and profile."""

from masterdom.domain.user.aggregates import User
from masterdom.domain.user.exceptions import (
    CannotDeleteAdminError,
    CannotDemoteAdminError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidProfileError,
    UserNotFoundError,
)
from masterdom.domain.user.repositories import UserRepository
from masterdom.domain.user.value_objects import (
    UNSET,
    Email,
    Profile,
    ProfilePatch,
    UserRole,
)

__all__ = [
    "UNSET",
    "CannotDeleteAdminError",
    "CannotDemoteAdminError",
    "CannotDemoteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidProfileError",
    "Profile",
    "ProfilePatch",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
