"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from masterdom.domain.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email address is already registered",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class CannotDemoteSelfError(AuthorizationError):
    """Cannot demote yourself from admin."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot remove your own admin rights",
            code=ErrorCode.CANNOT_DEMOTE_SELF,
        )


class CannotDemoteAdminError(AuthorizationError):
    """Only the super-admin may demote another admin."""

    def __init__(self) -> None:
        super().__init__(
            "Only the super-admin can remove admin rights from an admin",
            code=ErrorCode.CANNOT_DEMOTE_ADMIN,
        )


class CannotDeleteAdminError(AuthorizationError):
    """Admin accounts cannot be deleted."""

    def __init__(self) -> None:
        super().__init__(
            "Admin accounts cannot be deleted",
            code=ErrorCode.CANNOT_DELETE_ADMIN,
        )


class InvalidProfileError(ValidationError):
    """Profile update would leave the profile in an invalid state."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
