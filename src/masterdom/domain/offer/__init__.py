"""Offer catalog and response ledger domain."""

from masterdom.domain.offer.entities import (
    Offer,
    OfferResponse,
    OfferType,
    ResponseStatus,
)
from masterdom.domain.offer.exceptions import (
    DuplicateResponseError,
    InvalidOfferError,
    NotOfferAuthorError,
    OfferNotFoundError,
)
from masterdom.domain.offer.repositories import (
    OfferRepository,
    OfferResponseRepository,
)

__all__ = [
    "DuplicateResponseError",
    "InvalidOfferError",
    "NotOfferAuthorError",
    "Offer",
    "OfferNotFoundError",
    "OfferRepository",
    "OfferResponse",
    "OfferResponseRepository",
    "OfferType",
    "ResponseStatus",
]
