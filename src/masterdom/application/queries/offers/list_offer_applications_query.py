from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.offers import OfferApplicationDTO
from masterdom.domain.offer import NotOfferAuthorError, OfferNotFoundError, OfferRepository

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory
    from masterdom.application.ports import OfferReadPort


class ListOfferApplicationsQuery:
    """Responses to an offer; visible to the offer's author only."""

    def __init__(
        self,
        offer_repository: OfferRepository,
        offer_read_port: OfferReadPort,
        current_user: UserContext,
    ):
        self._offer_repo = offer_repository
        self._offer_read = offer_read_port
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOfferApplicationsQuery:
        return cls(
            offer_repository=factory.offer_repository(),
            offer_read_port=factory.offer_read_port(),
            current_user=factory.user_context,
        )

    async def execute(self, offer_id: int) -> list[OfferApplicationDTO]:
        offer = await self._offer_repo.find_by_id(offer_id)
        if offer is None:
            raise OfferNotFoundError(offer_id)
        if not offer.is_authored_by(self._user_id):
            raise NotOfferAuthorError(offer_id)

        return await self._offer_read.list_applications(offer_id)
