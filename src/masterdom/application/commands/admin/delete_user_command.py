from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from masterdom.domain.user import (
    CannotDeleteAdminError,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to delete a user. Admin accounts are protected."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: UUID) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        if user.is_admin:
            raise CannotDeleteAdminError

        await self._user_repo.delete(user_id)
        logger.info("User %s deleted", user_id)
