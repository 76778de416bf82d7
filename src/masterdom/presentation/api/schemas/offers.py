"""Offer catalog schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from masterdom.domain.offer import OfferType


class OfferCreateRequest(BaseModel):
    offer_type: OfferType
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    category_id: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "offer_type": "service_offer",
                "title": "Bathroom tiling",
                "description": "Tiling and grouting, 10 years of experience",
                "category_id": 1,
            },
        },
    )


class OfferResponse(BaseModel):
    """One row of the public catalog."""

    id: int
    title: str
    description: str
    offer_type: str
    category_id: Optional[int]
    created_at: datetime
    author_id: UUID
    author_first_name: str
    has_responded: bool

    model_config = ConfigDict(from_attributes=True)


class RespondRequest(BaseModel):
    message: str = Field(default="", max_length=5000)


class ApplicationResponse(BaseModel):
    """A response to an offer as seen by the offer's author."""

    id: int
    offer_id: int
    applicant_id: UUID
    applicant_first_name: str
    applicant_rating: Optional[float]
    message: str
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
