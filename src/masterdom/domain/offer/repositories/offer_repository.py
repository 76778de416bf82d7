"""Offer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from masterdom.domain.offer.entities import Offer, OfferType


class OfferRepository(ABC):
    """Repository interface for Offer entities (write side)."""

    @abstractmethod
    async def find_by_id(self, offer_id: int) -> Optional[Offer]:
        """Find an offer by ID regardless of its active flag."""

    @abstractmethod
    async def add(self, offer: Offer) -> Offer:
        """
        Insert a new offer.

        Returns
        -------
        The persisted offer with its store-assigned id
        """

    @abstractmethod
    async def save(self, offer: Offer) -> None:
        """Persist changes to an existing offer."""

    @abstractmethod
    async def delete(self, offer_id: int) -> None:
        """Delete an offer together with its responses and conversations."""

    @abstractmethod
    async def count(self, offer_type: Optional[OfferType] = None) -> int:
        """Count offers, optionally restricted to one type."""
