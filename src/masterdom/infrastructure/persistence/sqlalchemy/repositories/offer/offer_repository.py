"""SQLAlchemy implementation of OfferRepository."""

import logging
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.domain.offer import Offer, OfferRepository, OfferType
from masterdom.infrastructure.persistence.sqlalchemy.models.offer import OfferModel

logger = logging.getLogger(__name__)


class OfferRepositorySQLAlchemy(OfferRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, offer_id: int) -> Optional[Offer]:
        model = await self._session.get(OfferModel, offer_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def add(self, offer: Offer) -> Offer:
        model = OfferModel(
            author_id=offer.author_id,
            offer_type=offer.offer_type.value,
            title=offer.title,
            description=offer.description,
            category_id=offer.category_id,
            is_active=offer.is_active,
            created_at=offer.created_at,
            updated_at=offer.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug("Inserted offer %s", model.id)
        return self._map_to_domain(model)

    async def save(self, offer: Offer) -> None:
        model = await self._session.get(OfferModel, offer.id)
        if model is None:
            msg = f"Cannot update unknown offer {offer.id}"
            raise ValueError(msg)

        model.offer_type = offer.offer_type.value
        model.title = offer.title
        model.description = offer.description
        model.category_id = offer.category_id
        model.is_active = offer.is_active
        model.updated_at = offer.updated_at
        await self._session.flush()

    async def delete(self, offer_id: int) -> None:
        # Responses, conversations and messages cascade in the database
        await self._session.execute(delete(OfferModel).where(OfferModel.id == offer_id))
        await self._session.flush()

    async def count(self, offer_type: Optional[OfferType] = None) -> int:
        stmt = select(func.count(OfferModel.id))
        if offer_type is not None:
            stmt = stmt.where(OfferModel.offer_type == offer_type.value)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _map_to_domain(self, model: OfferModel) -> Offer:
        return Offer(
            id=model.id,
            author_id=model.author_id,
            offer_type=model.offer_type,
            title=model.title,
            description=model.description,
            category_id=model.category_id,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
