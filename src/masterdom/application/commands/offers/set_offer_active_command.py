from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from masterdom.domain.offer import Offer, OfferNotFoundError, OfferRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SetOfferActiveCommand:
    """Admin command to show or hide an offer in the public listing."""

    def __init__(self, offer_repository: OfferRepository):
        self._offer_repo = offer_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SetOfferActiveCommand:
        return cls(offer_repository=factory.offer_repository())

    async def execute(self, offer_id: int, is_active: bool) -> Offer:
        offer = await self._offer_repo.find_by_id(offer_id)
        if offer is None:
            raise OfferNotFoundError(offer_id)

        offer.set_active(is_active)
        await self._offer_repo.save(offer)

        logger.info("Offer %s set active=%s", offer_id, is_active)
        return offer
