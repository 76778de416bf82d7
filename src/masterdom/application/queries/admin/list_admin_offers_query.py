from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.offers import AdminOfferDTO

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory
    from masterdom.application.ports import OfferReadPort


class ListAdminOffersQuery:
    """Every offer, including inactive ones, for the back-office."""

    def __init__(self, offer_read_port: OfferReadPort):
        self._offer_read = offer_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAdminOffersQuery:
        return cls(offer_read_port=factory.offer_read_port())

    async def execute(self) -> list[AdminOfferDTO]:
        return await self._offer_read.list_all_offers()
