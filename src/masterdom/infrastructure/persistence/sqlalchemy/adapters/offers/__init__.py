from masterdom.infrastructure.persistence.sqlalchemy.adapters.offers.sqlalchemy_offer_read_adapter import (  # NOQA: E501
    SqlAlchemyOfferReadAdapter,
)

__all__ = ["SqlAlchemyOfferReadAdapter"]
