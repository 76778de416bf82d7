"""Service category reference data."""

from masterdom.domain.category.category import Category
from masterdom.domain.category.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    InvalidCategoryError,
)
from masterdom.domain.category.repository import CategoryRepository

__all__ = [
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryNotFoundError",
    "CategoryRepository",
    "InvalidCategoryError",
]
