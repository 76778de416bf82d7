from dataclasses import dataclass
from typing import Optional

from masterdom.domain.category import Category


@dataclass(frozen=True)
class CategoryDTO:
    """A service category."""

    id: int
    name: str
    description: Optional[str]

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDTO":
        return cls(
            id=category.id or 0,
            name=category.name,
            description=category.description,
        )
