"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from masterdom.domain.shared import AuthenticationError, ErrorCode, ValidationError
from masterdom.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    Profile,
    User,
    UserRole,
)
from masterdom_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    WeakPasswordError,
)

if TYPE_CHECKING:
    from masterdom.domain.user import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates masterdom_auth primitives (password hashing, JWT tokens)
    with the User aggregate to provide:
    - Registration (credentials and profile in one unit)
    - Login with password
    - Token verification

    Errors from masterdom_auth are translated into domain exceptions so the
    presentation layer maps them like any other domain error.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        super_admin_email: Optional[str] = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._super_admin_email = (super_admin_email or "").strip().lower() or None

    @property
    def token_lifetime_seconds(self) -> int:
        return int(self._jwt_service.access_token_lifetime.total_seconds())

    def _create_access_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            is_admin=user.is_admin,
        )

    async def register(
        self,
        email: str,
        password: str,
        profile: Profile,
    ) -> User:
        """
        Create a user with credentials and profile.

        Raises
        ------
        InvalidEmailError
            If the email is malformed
        ValidationError
            If the password is too weak (code WEAK_PASSWORD)
        EmailAlreadyExistsError
            If the email is taken
        """
        normalized = Email(email)
        if await self._user_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized.value)

        try:
            password_hash = self._password_service.hash(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, code=ErrorCode.WEAK_PASSWORD) from e

        role = (
            UserRole.ADMIN
            if self._super_admin_email == normalized.value
            else UserRole.USER
        )
        user = User.create(normalized, password_hash, profile, role=role)
        # The repository re-checks uniqueness at the store level
        await self._user_repo.save(user)

        logger.info("User registered: %s (role: %s)", user.email, role.value)
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """
        Verify credentials and issue an access token.

        Unknown email and wrong password fail identically.
        """
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            user = None

        if user is None:
            self._password_service.verify_dummy(password)
            logger.debug("Failed login for %s: unknown email", email)
            raise AuthenticationError(
                INVALID_CREDENTIALS_MESSAGE,
                code=ErrorCode.INVALID_CREDENTIALS,
            )

        if not self._password_service.verify(password, user.password_hash):
            logger.debug("Failed login for %s: wrong password", user.email)
            raise AuthenticationError(
                INVALID_CREDENTIALS_MESSAGE,
                code=ErrorCode.INVALID_CREDENTIALS,
            )

        logger.info("User logged in: %s", user.email)
        return user, self._create_access_token(user)

    def verify_token(self, token: str) -> TokenPayload:
        try:
            payload = self._jwt_service.verify_token(token)
        except InvalidTokenError as e:
            raise AuthenticationError(e.message, code=ErrorCode.INVALID_TOKEN) from e
        if not payload.is_access_token():
            raise AuthenticationError(
                "Not an access token",
                code=ErrorCode.INVALID_TOKEN,
            )
        return payload
