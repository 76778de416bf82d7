"""Category domain exceptions."""

from masterdom.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class CategoryNotFoundError(NotFoundError):
    """Category not found."""

    def __init__(self, category_id: int) -> None:
        self.category_id = category_id
        super().__init__(
            "Category not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": category_id},
        )


class CategoryAlreadyExistsError(ConflictError):
    """A category with this name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Category already exists: {name}",
            code=ErrorCode.CATEGORY_ALREADY_EXISTS,
            details={"name": name},
        )


class InvalidCategoryError(ValidationError):
    """Category data failed validation."""
