from masterdom.infrastructure.persistence.sqlalchemy.repositories.offer.offer_repository import (  # NOQA: E501
    OfferRepositorySQLAlchemy,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.offer.offer_response_repository import (  # NOQA: E501
    OfferResponseRepositorySQLAlchemy,
)

__all__ = ["OfferRepositorySQLAlchemy", "OfferResponseRepositorySQLAlchemy"]
