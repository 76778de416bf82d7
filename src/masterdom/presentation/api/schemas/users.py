"""Profile schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdateRequest(BaseModel):
    """Partial profile update.

    Only keys present in the body are applied; an explicit null clears a
    nullable attribute. Role is not accepted here.
    """

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=50)
    bio: Optional[str] = None
    years_of_experience: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"bio": "Plumber based in Sofia"}},
    )


class UserDetailResponse(BaseModel):
    """Identity and profile of a user."""

    id: UUID
    email: str
    role: str
    is_admin: bool
    first_name: str
    last_name: Optional[str]
    phone_number: Optional[str]
    bio: Optional[str]
    years_of_experience: Optional[int]
    average_rating: Optional[float]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
