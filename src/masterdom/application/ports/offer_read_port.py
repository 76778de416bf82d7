"""Offer read port (report-like interface).

Each method corresponds to one listing screen. Methods return DTOs
joined with author/applicant data, not domain entities.
"""

from __future__ import annotations

from typing import Optional, Protocol
from uuid import UUID

from masterdom.application.dtos.offers import (
    AdminOfferDTO,
    OfferApplicationDTO,
    OfferFilter,
    OfferListItemDTO,
)


class OfferReadPort(Protocol):
    """Read-side interface for offers and their responses."""

    async def list_active_offers(
        self,
        filters: OfferFilter,
        viewer_id: Optional[UUID] = None,
    ) -> list[OfferListItemDTO]:
        """Active offers matching all filters, newest first.

        ``has_responded`` is computed for ``viewer_id`` and is False when
        no viewer is given.
        """
        ...

    async def list_applications(self, offer_id: int) -> list[OfferApplicationDTO]:
        """Responses to one offer with applicant name and rating, newest first."""
        ...

    async def list_all_offers(self) -> list[AdminOfferDTO]:
        """Every offer regardless of its active flag, with author email."""
        ...
