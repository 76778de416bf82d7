"""DTOs for user details."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from masterdom.domain.user import User


@dataclass(frozen=True)
class UserDetailDTO:
    """Identity and profile of a user; never carries the password hash."""

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

    @classmethod
    def from_user(cls, user: User) -> "UserDetailDTO":
        profile = user.profile
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            is_admin=user.is_admin,
            first_name=profile.first_name,
            last_name=profile.last_name,
            phone_number=profile.phone_number,
            bio=profile.bio,
            years_of_experience=profile.years_of_experience,
            average_rating=profile.average_rating,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
