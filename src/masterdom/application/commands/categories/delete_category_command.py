from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.domain.category import CategoryNotFoundError, CategoryRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class DeleteCategoryCommand:
    """Delete a category; offers referencing it lose their category."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: int) -> None:
        if await self._category_repo.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)
        await self._category_repo.delete(category_id)
