from masterdom.domain.offer.repositories.offer_repository import OfferRepository
from masterdom.domain.offer.repositories.offer_response_repository import (
    OfferResponseRepository,
)

__all__ = ["OfferRepository", "OfferResponseRepository"]
