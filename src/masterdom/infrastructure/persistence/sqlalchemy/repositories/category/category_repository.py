"""SQLAlchemy implementation of CategoryRepository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.domain.category import (
    Category,
    CategoryAlreadyExistsError,
    CategoryRepository,
)
from masterdom.infrastructure.persistence.sqlalchemy.models import CategoryModel
from masterdom.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def add(self, category: Category) -> Category:
        model = CategoryModel(name=category.name, description=category.description)
        self._session.add(model)
        await self._flush(category.name)
        return self._map_to_domain(model)

    async def save(self, category: Category) -> None:
        model = await self._session.get(CategoryModel, category.id)
        if model is None:
            msg = f"Cannot update unknown category {category.id}"
            raise ValueError(msg)
        model.name = category.name
        model.description = category.description
        await self._flush(category.name)

    async def delete(self, category_id: int) -> None:
        # Offers keep a NULL category via ON DELETE SET NULL
        await self._session.execute(
            delete(CategoryModel).where(CategoryModel.id == category_id),
        )
        await self._session.flush()

    async def _flush(self, name: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise CategoryAlreadyExistsError(name) from e
            raise

    def _map_to_domain(self, model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name, description=model.description)
