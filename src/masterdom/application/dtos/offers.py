"""DTOs for the offer catalog and response ledger (read models)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from masterdom.domain.offer import OfferType


@dataclass(frozen=True)
class OfferFilter:
    """Conjunctive filters for the public offer listing.

    ``search`` matches case-insensitively anywhere in title or description.
    """

    offer_type: Optional[OfferType] = None
    search: Optional[str] = None
    category_id: Optional[int] = None

    @property
    def search_term(self) -> Optional[str]:
        if self.search is None:
            return None
        term = self.search.strip()
        return term or None


@dataclass(frozen=True)
class OfferListItemDTO:
    """An active offer as shown in the public listing."""

    id: int
    title: str
    description: str
    offer_type: str
    category_id: Optional[int]
    created_at: datetime
    author_id: UUID
    author_first_name: str
    has_responded: bool


@dataclass(frozen=True)
class OfferApplicationDTO:
    """A response to an offer, joined with the applicant's profile."""

    id: int
    offer_id: int
    applicant_id: UUID
    applicant_first_name: str
    applicant_rating: Optional[float]
    message: str
    status: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AdminOfferDTO:
    """An offer as shown in the admin back-office (any active state)."""

    id: int
    title: str
    description: str
    offer_type: str
    category_id: Optional[int]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    author_id: UUID
    author_first_name: str
    author_email: str
