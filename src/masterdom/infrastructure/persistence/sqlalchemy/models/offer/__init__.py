from masterdom.infrastructure.persistence.sqlalchemy.models.offer.offer_model import (
    OfferModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.offer.offer_response_model import (  # NOQA: E501
    OfferResponseModel,
)

__all__ = ["OfferModel", "OfferResponseModel"]
