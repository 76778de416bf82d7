"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from masterdom.domain.category.category import Category


class CategoryRepository(ABC):
    """Repository interface for categories."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """Return all categories ordered by name."""

    @abstractmethod
    async def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by ID."""

    @abstractmethod
    async def add(self, category: Category) -> Category:
        """
        Insert a category.

        Raises
        ------
        CategoryAlreadyExistsError
            If the name is taken
        """

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Persist changes to an existing category."""

    @abstractmethod
    async def delete(self, category_id: int) -> None:
        """Delete a category; referencing offers keep a NULL category."""
