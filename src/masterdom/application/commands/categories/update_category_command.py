from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from masterdom.domain.category import (
    Category,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class UpdateCategoryCommand:
    """Rename a category and replace its description."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: int,
        name: str,
        description: Optional[str] = None,
    ) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        category.rename(name, description)
        await self._category_repo.save(category)
        return category
