from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from masterdom.domain.user import ProfilePatch, User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateProfileCommand:
    """Apply a partial profile update to the current user.

    Role is not part of ProfilePatch, so self-service can never change it.
    """

    def __init__(self, user_repository: UserRepository, current_user: UserContext):
        self._user_repo = user_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProfileCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.user_context,
        )

    async def execute(self, patch: ProfilePatch) -> User:
        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(str(self._user_id))

        if patch.is_empty():
            return user

        user.update_profile(patch)
        await self._user_repo.save(user)

        logger.info(
            "Profile of %s updated (%s)",
            self._user_id,
            ", ".join(sorted(patch.supplied())),
        )
        return user
