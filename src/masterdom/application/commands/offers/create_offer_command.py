"""Publish a new offer to the catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from masterdom.domain.category import CategoryNotFoundError, CategoryRepository
from masterdom.domain.offer import InvalidOfferError, Offer, OfferRepository, OfferType

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateOfferCommand:
    """Validate and create an offer authored by the current user."""

    def __init__(
        self,
        offer_repository: OfferRepository,
        category_repository: CategoryRepository,
        current_user: UserContext,
    ):
        self._offer_repo = offer_repository
        self._category_repo = category_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateOfferCommand:
        return cls(
            offer_repository=factory.offer_repository(),
            category_repository=factory.category_repository(),
            current_user=factory.user_context,
        )

    async def execute(
        self,
        offer_type: str,
        title: str,
        description: str = "",
        category_id: Optional[int] = None,
    ) -> Offer:
        try:
            parsed_type = OfferType(offer_type)
        except ValueError as e:
            valid = ", ".join(t.value for t in OfferType)
            msg = f"Invalid offer type '{offer_type}'. Expected one of: {valid}"
            raise InvalidOfferError(msg) from e

        if category_id is not None:
            category = await self._category_repo.find_by_id(category_id)
            if category is None:
                raise CategoryNotFoundError(category_id)

        offer = Offer(
            author_id=self._user_id,
            offer_type=parsed_type,
            title=title,
            description=description,
            category_id=category_id,
        )
        offer = await self._offer_repo.add(offer)

        logger.info("Offer %s created by %s", offer.id, self._user_id)
        return offer
