from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.categories import CategoryDTO
from masterdom.domain.category import CategoryRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class ListCategoriesQuery:
    """All categories ordered by name."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[CategoryDTO]:
        categories = await self._category_repo.list_all()
        return [CategoryDTO.from_entity(c) for c in categories]
