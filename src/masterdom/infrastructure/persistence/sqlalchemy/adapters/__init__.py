"""Read-side adapters implementing application ports."""

from masterdom.infrastructure.persistence.sqlalchemy.adapters.chat import (
    SqlAlchemyChatReadAdapter,
)
from masterdom.infrastructure.persistence.sqlalchemy.adapters.offers import (
    SqlAlchemyOfferReadAdapter,
)

__all__ = ["SqlAlchemyChatReadAdapter", "SqlAlchemyOfferReadAdapter"]
