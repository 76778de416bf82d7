from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.users import UserDetailDTO
from masterdom.domain.user import UserRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class ListUsersQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self) -> list[UserDetailDTO]:
        users = await self._user_repo.list_all()
        return [UserDetailDTO.from_user(user) for user in users]
