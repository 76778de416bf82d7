"""Request-scoped dependencies: sessions, auth services and callers.

Routers never build repositories or services themselves. They declare one
of the ``Annotated`` aliases below and FastAPI wires the rest.
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from masterdom.application.context import UserContext
from masterdom.application.services import AuthenticationService
from masterdom.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
)
from masterdom.infrastructure.persistence.sqlalchemy.engine import build_engine
from masterdom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from masterdom.presentation.api.config import get_api_settings
from masterdom_auth import InvalidTokenError, JWTService, PasswordHashingService
from masterdom_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine; owns the connection pool."""
    return build_engine(get_settings().database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session per request.

    Routers commit explicitly. Whatever is still pending when the session
    closes is rolled back.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Auth services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    settings: Settings = Depends(get_api_settings),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        super_admin_email=settings.super_admin_email,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Callers
# -----------------------------------------------------------------------------


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    Resolve the caller from the bearer token.

    Only verified claims feed the returned context. The account must
    still exist; a token outliving its user is rejected.

    Raises
    ------
    AuthenticationError
        AUTHENTICATION_REQUIRED without a token, INVALID_TOKEN when the
        token fails verification, is not an access token or belongs to a
        deleted user.
    """
    if credentials is None:
        raise AuthenticationError

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.debug("Bearer token rejected: %s", e)
        raise AuthenticationError(
            "Invalid or expired token",
            code=ErrorCode.INVALID_TOKEN,
        ) from e

    if not payload.is_access_token():
        logger.warning("Token of type %r used by %s", payload.token_type, payload.user_id)
        raise AuthenticationError("Invalid token type", code=ErrorCode.INVALID_TOKEN)

    if await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id) is None:
        logger.warning("Token presented for deleted user %s", payload.user_id)
        raise AuthenticationError(
            "User no longer exists",
            code=ErrorCode.INVALID_TOKEN,
        )

    return UserContext.from_token(payload)


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Optional[UserContext]:
    """Like ``get_current_user`` but anonymous instead of 401."""
    if credentials is None:
        return None
    try:
        return await get_current_user(credentials, session, jwt_service)
    except AuthenticationError:
        return None


async def require_admin(user: UserContext = Depends(get_current_user)) -> UserContext:
    if not user.is_admin:
        raise AuthorizationError("Admin access required", code=ErrorCode.ADMIN_REQUIRED)
    return user


# -----------------------------------------------------------------------------
# Repository factories
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_current_user),
) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_public_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: Optional[UserContext] = Depends(get_current_user_optional),
) -> SQLAlchemyRepositoryFactory:
    """Factory for endpoints open to anonymous callers."""
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


PublicRepoFactory = Annotated[
    SQLAlchemyRepositoryFactory,
    Depends(get_public_repository_factory),
]


async def get_admin_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(require_admin),
) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


AdminRepoFactory = Annotated[
    SQLAlchemyRepositoryFactory,
    Depends(get_admin_repository_factory),
]
