"""Category entity."""

from typing import Optional

from masterdom.domain.category.exceptions import InvalidCategoryError


class Category:
    """Reference entity used to classify offers."""

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        id: Optional[int] = None,
    ):
        self._id = id
        self._name = self._validate_name(name)
        self._description = description

    @staticmethod
    def _validate_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            msg = "Category name cannot be empty"
            raise InvalidCategoryError(msg)
        return name

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    def rename(self, name: str, description: Optional[str] = None) -> None:
        self._name = self._validate_name(name)
        self._description = description

    def __repr__(self) -> str:
        return f"Category(id={self._id}, name={self._name!r})"
