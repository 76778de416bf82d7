"""List offers query - public catalog listing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from masterdom.application.dtos.offers import OfferFilter, OfferListItemDTO

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory
    from masterdom.application.ports import OfferReadPort


class ListOffersQuery:
    """Query to list active offers, personalised for an optional viewer."""

    def __init__(
        self,
        offer_read_port: OfferReadPort,
        viewer_id: Optional[UUID] = None,
    ):
        self._offer_read = offer_read_port
        self._viewer_id = viewer_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOffersQuery:
        context = factory.user_context
        return cls(
            offer_read_port=factory.offer_read_port(),
            viewer_id=context.user_id if context else None,
        )

    async def execute(
        self,
        filters: Optional[OfferFilter] = None,
    ) -> list[OfferListItemDTO]:
        return await self._offer_read.list_active_offers(
            filters or OfferFilter(),
            viewer_id=self._viewer_id,
        )
