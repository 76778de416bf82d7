"""Record an applicant's response to an offer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from masterdom.domain.offer import (
    DuplicateResponseError,
    OfferNotFoundError,
    OfferRepository,
    OfferResponse,
    OfferResponseRepository,
)

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class RespondToOfferCommand:
    """Create a pending response; each user may respond to an offer once."""

    def __init__(
        self,
        offer_repository: OfferRepository,
        response_repository: OfferResponseRepository,
        current_user: UserContext,
    ):
        self._offer_repo = offer_repository
        self._response_repo = response_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RespondToOfferCommand:
        return cls(
            offer_repository=factory.offer_repository(),
            response_repository=factory.offer_response_repository(),
            current_user=factory.user_context,
        )

    async def execute(self, offer_id: int, message: str = "") -> OfferResponse:
        offer = await self._offer_repo.find_by_id(offer_id)
        if offer is None:
            raise OfferNotFoundError(offer_id)

        # Friendly pre-check; the unique constraint is the real guard
        if await self._response_repo.exists(offer_id, self._user_id):
            raise DuplicateResponseError(offer_id, str(self._user_id))

        response = OfferResponse(
            offer_id=offer_id,
            applicant_id=self._user_id,
            message=message,
        )
        response = await self._response_repo.add(response)

        logger.info("User %s responded to offer %s", self._user_id, offer_id)
        return response
