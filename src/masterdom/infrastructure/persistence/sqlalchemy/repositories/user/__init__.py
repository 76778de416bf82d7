from masterdom.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = ["UserRepositorySQLAlchemy"]
