from masterdom.domain.offer.entities.offer import Offer
from masterdom.domain.offer.entities.offer_response import OfferResponse
from masterdom.domain.offer.entities.offer_type import OfferType
from masterdom.domain.offer.entities.response_status import ResponseStatus

__all__ = ["Offer", "OfferResponse", "OfferType", "ResponseStatus"]
