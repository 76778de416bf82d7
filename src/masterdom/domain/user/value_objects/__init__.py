"""User value objects."""

from masterdom.domain.user.value_objects.email import Email
from masterdom.domain.user.value_objects.profile import (
    UNSET,
    Profile,
    ProfilePatch,
)
from masterdom.domain.user.value_objects.user_role import UserRole

__all__ = [
    "UNSET",
    "Email",
    "Profile",
    "ProfilePatch",
    "UserRole",
]
