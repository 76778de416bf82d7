from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from masterdom.domain.offer import OfferNotFoundError, OfferRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteOfferCommand:
    """Admin command to delete an offer with its responses and conversations."""

    def __init__(self, offer_repository: OfferRepository):
        self._offer_repo = offer_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteOfferCommand:
        return cls(offer_repository=factory.offer_repository())

    async def execute(self, offer_id: int) -> None:
        offer = await self._offer_repo.find_by_id(offer_id)
        if offer is None:
            raise OfferNotFoundError(offer_id)

        await self._offer_repo.delete(offer_id)
        logger.info("Offer %s deleted", offer_id)
