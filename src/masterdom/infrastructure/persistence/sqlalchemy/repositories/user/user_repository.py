"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.domain.user import (
    Email,
    EmailAlreadyExistsError,
    Profile,
    User,
    UserRepository,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.user import (
    ProfileModel,
    UserModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)

_PROFILE_COLUMNS = (
    "first_name",
    "last_name",
    "phone_number",
    "bio",
    "years_of_experience",
    "average_rating",
)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Users and profiles live in two tables but are written together, so a
    registration either creates both rows or neither.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        stmt = select(UserModel.id).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user_id: UUID) -> None:
        # Profile, offers, responses, conversations and messages go with
        # the user through ON DELETE CASCADE
        await self._session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self._session.flush()
        logger.info("Deleted user and all associated data: %s", user_id)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(UserModel.id)))
        return result.scalar_one()

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.email)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        profile = Profile(
            **{name: getattr(model.profile, name) for name in _PROFILE_COLUMNS},
        )
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            profile=profile,
            role=model.role,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        model.profile = ProfileModel(user_id=user.id, created_at=user.created_at)
        _copy_profile(user, model.profile)
        return model

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.updated_at = user.updated_at
        _copy_profile(user, model.profile)


def _copy_profile(user: User, target: ProfileModel) -> None:
    for name in _PROFILE_COLUMNS:
        setattr(target, name, getattr(user.profile, name))
    target.updated_at = user.updated_at
