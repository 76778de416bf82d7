"""SQLAlchemy implementation of OfferResponseRepository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.domain.offer import (
    DuplicateResponseError,
    OfferResponse,
    OfferResponseRepository,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.offer import (
    OfferResponseModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)


class OfferResponseRepositorySQLAlchemy(OfferResponseRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, offer_id: int, applicant_id: UUID) -> bool:
        stmt = select(OfferResponseModel.id).where(
            OfferResponseModel.offer_id == offer_id,
            OfferResponseModel.applicant_id == applicant_id,
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def add(self, response: OfferResponse) -> OfferResponse:
        model = OfferResponseModel(
            offer_id=response.offer_id,
            applicant_id=response.applicant_id,
            message=response.message,
            status=response.status.value,
            created_at=response.created_at,
            updated_at=response.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # A concurrent request inserted the same pair after our pre-check
            if is_unique_violation(e):
                raise DuplicateResponseError(
                    response.offer_id,
                    str(response.applicant_id),
                ) from e
            raise

        return OfferResponse(
            id=model.id,
            offer_id=model.offer_id,
            applicant_id=model.applicant_id,
            message=model.message,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
