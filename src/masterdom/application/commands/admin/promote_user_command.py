from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from masterdom.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class PromoteUserCommand:
    """Grant admin rights to a user identified by email (operator CLI)."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PromoteUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, email: str) -> User:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)

        if not user.is_admin:
            user.promote_to_admin()
            await self._user_repo.save(user)
            logger.info("User %s promoted to admin", user.email)
        return user
