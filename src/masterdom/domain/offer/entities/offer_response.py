"""OfferResponse entity (an application to an offer)."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from masterdom.domain.offer.entities.response_status import ResponseStatus
from masterdom.domain.shared.time import utc_now


class OfferResponse:
    """
    A user's application to an offer.

    At most one response exists per (offer_id, applicant_id); the store
    enforces this with a unique constraint.
    """

    def __init__(  # NOQA: PLR0913
        self,
        offer_id: int,
        applicant_id: UUID,
        message: str = "",
        status: Union[str, ResponseStatus] = ResponseStatus.PENDING,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._offer_id = offer_id
        self._applicant_id = applicant_id
        self._message = message or ""
        self._status = (
            status if isinstance(status, ResponseStatus) else ResponseStatus(status)
        )
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def offer_id(self) -> int:
        return self._offer_id

    @property
    def applicant_id(self) -> UUID:
        return self._applicant_id

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> ResponseStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def __repr__(self) -> str:
        return (
            f"OfferResponse(id={self._id}, offer_id={self._offer_id}, "
            f"applicant_id={self._applicant_id})"
        )
