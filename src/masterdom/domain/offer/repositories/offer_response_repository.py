"""Offer response repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from masterdom.domain.offer.entities import OfferResponse


class OfferResponseRepository(ABC):
    """Repository interface for OfferResponse entities (write side)."""

    @abstractmethod
    async def exists(self, offer_id: int, applicant_id: UUID) -> bool:
        """Check whether the applicant already responded to the offer."""

    @abstractmethod
    async def add(self, response: OfferResponse) -> OfferResponse:
        """
        Insert a new response.

        Raises
        ------
        DuplicateResponseError
            If the (offer, applicant) pair already exists
        """
