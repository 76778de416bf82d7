"""SQLAlchemy repository implementations organized by bounded context."""

from masterdom.infrastructure.persistence.sqlalchemy.repositories.category import (
    CategoryRepositorySQLAlchemy,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.chat import (
    ConversationRepositorySQLAlchemy,
)

# Repository Factory
from masterdom.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.offer import (
    OfferRepositorySQLAlchemy,
    OfferResponseRepositorySQLAlchemy,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "CategoryRepositorySQLAlchemy",
    "ConversationRepositorySQLAlchemy",
    "OfferRepositorySQLAlchemy",
    "OfferResponseRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
