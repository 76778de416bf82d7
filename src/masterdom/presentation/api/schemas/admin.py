"""Admin back-office schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from masterdom.presentation.api.schemas.users import ProfileUpdateRequest


class AdminUserUpdateRequest(ProfileUpdateRequest):
    """Profile patch plus the admin flag; promotion and demotion go here."""

    is_admin: Optional[bool] = None


class AdminOfferUpdateRequest(BaseModel):
    is_active: bool


class AdminOfferResponse(BaseModel):
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

    model_config = ConfigDict(from_attributes=True)


class AdminStatsResponse(BaseModel):
    total_users: int = Field(..., ge=0)
    total_offers: int = Field(..., ge=0)
    total_service_requests: int = Field(..., ge=0)
    total_service_offers: int = Field(..., ge=0)

    model_config = ConfigDict(from_attributes=True)


class OfferStateResponse(BaseModel):
    id: int
    is_active: bool
    updated_at: datetime
