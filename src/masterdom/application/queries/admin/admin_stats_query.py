"""Platform statistics for the admin dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.admin import AdminStatsDTO
from masterdom.domain.offer import OfferRepository, OfferType
from masterdom.domain.user import UserRepository

if TYPE_CHECKING:
    from masterdom.application.factories import RepositoryFactory


class AdminStatsQuery:
    """Count users and offers (all offers, active or not)."""

    def __init__(
        self,
        user_repository: UserRepository,
        offer_repository: OfferRepository,
    ):
        self._user_repo = user_repository
        self._offer_repo = offer_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AdminStatsQuery:
        return cls(
            user_repository=factory.user_repository(),
            offer_repository=factory.offer_repository(),
        )

    async def execute(self) -> AdminStatsDTO:
        return AdminStatsDTO(
            total_users=await self._user_repo.count(),
            total_offers=await self._offer_repo.count(),
            total_service_requests=await self._offer_repo.count(
                OfferType.REQUEST_FOR_SERVICE,
            ),
            total_service_offers=await self._offer_repo.count(
                OfferType.SERVICE_OFFER,
            ),
        )
