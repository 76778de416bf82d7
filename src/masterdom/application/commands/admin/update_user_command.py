"""Admin update of another user's profile and role."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from masterdom.domain.user import (
    CannotDemoteAdminError,
    CannotDemoteSelfError,
    ProfilePatch,
    User,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """
    Command to update a user's profile and admin flag.

    Promotion is always allowed. Demotion follows a two-tier hierarchy:
    nobody demotes themself, and only the configured super-admin may
    demote another admin.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        current_user: UserContext,
        super_admin_email: Optional[str] = None,
    ):
        self._user_repo = user_repository
        self._actor_id = current_user.user_id
        self._super_admin_email = (super_admin_email or "").strip().lower() or None

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        super_admin_email: Optional[str] = None,
    ) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.user_context,
            super_admin_email=super_admin_email,
        )

    async def execute(
        self,
        user_id: UUID,
        patch: Optional[ProfilePatch] = None,
        is_admin: Optional[bool] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        demoting = is_admin is False and user.is_admin
        if demoting:
            await self._check_can_demote(user)

        if patch is not None and not patch.is_empty():
            user.update_profile(patch)
        if is_admin is True:
            user.promote_to_admin()
        elif demoting:
            user.demote_to_user()

        await self._user_repo.save(user)

        logger.info("User %s updated by admin %s", user_id, self._actor_id)
        return user

    async def _check_can_demote(self, target: User) -> None:
        if target.id == self._actor_id:
            raise CannotDemoteSelfError

        actor = await self._user_repo.find_by_id(self._actor_id)
        actor_is_super = (
            actor is not None
            and self._super_admin_email is not None
            and actor.email == self._super_admin_email
        )
        if not actor_is_super:
            raise CannotDemoteAdminError
