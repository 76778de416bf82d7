"""Query to get a user's identity and profile."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from masterdom.application.dtos.users import UserDetailDTO
from masterdom.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class GetUserDetailQuery:
    """Query to retrieve one user, by default the current one."""

    def __init__(
        self,
        user_repository: UserRepository,
        user_id: Optional[UUID] = None,
    ) -> None:
        self._user_repo = user_repository
        self._user_id = user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserDetailQuery:
        context = factory.user_context
        return cls(
            user_repository=factory.user_repository(),
            user_id=context.user_id if context else None,
        )

    async def execute(self, user_id: Optional[UUID] = None) -> UserDetailDTO:
        resolved_id = user_id or self._user_id
        if resolved_id is None:
            msg = "User id must be provided either at construction or execution"
            raise ValueError(msg)

        user = await self._user_repo.find_by_id(resolved_id)
        if user is None:
            raise UserNotFoundError(str(resolved_id))
        return UserDetailDTO.from_user(user)
