"""SQLAlchemy implementation of OfferReadPort.

Listings are built as single joined SELECTs that project straight into
DTOs; no aggregates are loaded.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.application.dtos.offers import (
    AdminOfferDTO,
    OfferApplicationDTO,
    OfferFilter,
    OfferListItemDTO,
)
from masterdom.application.ports import OfferReadPort
from masterdom.infrastructure.persistence.sqlalchemy.models import (
    OfferModel,
    OfferResponseModel,
    ProfileModel,
    UserModel,
)


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlAlchemyOfferReadAdapter(OfferReadPort):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_active_offers(
        self,
        filters: OfferFilter,
        viewer_id: Optional[UUID] = None,
    ) -> list[OfferListItemDTO]:
        columns = [OfferModel, ProfileModel.first_name]
        if viewer_id is not None:
            responded = (
                select(OfferResponseModel.id)
                .where(
                    OfferResponseModel.offer_id == OfferModel.id,
                    OfferResponseModel.applicant_id == viewer_id,
                )
                .exists()
            )
            columns.append(responded.label("has_responded"))

        stmt = (
            select(*columns)
            .join(ProfileModel, ProfileModel.user_id == OfferModel.author_id)
            .where(OfferModel.is_active.is_(True))
        )

        if filters.offer_type is not None:
            stmt = stmt.where(OfferModel.offer_type == filters.offer_type.value)
        if filters.category_id is not None:
            stmt = stmt.where(OfferModel.category_id == filters.category_id)
        term = filters.search_term
        if term:
            pattern = _like_pattern(term)
            stmt = stmt.where(
                or_(
                    OfferModel.title.ilike(pattern, escape="\\"),
                    OfferModel.description.ilike(pattern, escape="\\"),
                ),
            )

        stmt = stmt.order_by(OfferModel.created_at.desc(), OfferModel.id.desc())
        result = await self._session.execute(stmt)

        items: list[OfferListItemDTO] = []
        for row in result.all():
            offer: OfferModel = row[0]
            items.append(
                OfferListItemDTO(
                    id=offer.id,
                    title=offer.title,
                    description=offer.description,
                    offer_type=offer.offer_type,
                    category_id=offer.category_id,
                    created_at=offer.created_at,
                    author_id=offer.author_id,
                    author_first_name=row[1],
                    has_responded=bool(row[2]) if viewer_id is not None else False,
                ),
            )
        return items

    async def list_applications(self, offer_id: int) -> list[OfferApplicationDTO]:
        stmt = (
            select(
                OfferResponseModel,
                ProfileModel.first_name,
                ProfileModel.average_rating,
            )
            .join(ProfileModel, ProfileModel.user_id == OfferResponseModel.applicant_id)
            .where(OfferResponseModel.offer_id == offer_id)
            .order_by(
                OfferResponseModel.created_at.desc(),
                OfferResponseModel.id.desc(),
            )
        )
        result = await self._session.execute(stmt)

        return [
            OfferApplicationDTO(
                id=response.id,
                offer_id=response.offer_id,
                applicant_id=response.applicant_id,
                applicant_first_name=first_name,
                applicant_rating=rating,
                message=response.message,
                status=response.status,
                created_at=response.created_at,
                updated_at=response.updated_at,
            )
            for response, first_name, rating in result.all()
        ]

    async def list_all_offers(self) -> list[AdminOfferDTO]:
        stmt = (
            select(OfferModel, ProfileModel.first_name, UserModel.email)
            .join(UserModel, UserModel.id == OfferModel.author_id)
            .join(ProfileModel, ProfileModel.user_id == OfferModel.author_id)
            .order_by(OfferModel.created_at.desc(), OfferModel.id.desc())
        )
        result = await self._session.execute(stmt)

        return [
            AdminOfferDTO(
                id=offer.id,
                title=offer.title,
                description=offer.description,
                offer_type=offer.offer_type,
                category_id=offer.category_id,
                is_active=offer.is_active,
                created_at=offer.created_at,
                updated_at=offer.updated_at,
                author_id=offer.author_id,
                author_first_name=first_name,
                author_email=email,
            )
            for offer, first_name, email in result.all()
        ]
