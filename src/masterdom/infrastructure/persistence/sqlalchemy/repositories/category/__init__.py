from masterdom.infrastructure.persistence.sqlalchemy.repositories.category.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)

__all__ = ["CategoryRepositorySQLAlchemy"]
