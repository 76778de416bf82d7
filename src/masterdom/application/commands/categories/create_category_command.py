from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from masterdom.domain.category import Category, CategoryRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class CreateCategoryCommand:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, name: str, description: Optional[str] = None) -> Category:
        return await self._category_repo.add(Category(name, description))
