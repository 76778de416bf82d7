"""SQLAlchemy model for user profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from masterdom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from masterdom.infrastructure.persistence.sqlalchemy.models.user.user_model import (  # NOQA: E501
        UserModel,
    )


class ProfileModel(Base, TimestampMixin):
    """Profile store row, one per user (user_id is the primary key)."""

    __tablename__ = "profiles"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    years_of_experience: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    average_rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    user: Mapped[UserModel] = relationship(back_populates="profile")

    def __repr__(self) -> str:
        return f"<ProfileModel(user_id={self.user_id}, first_name={self.first_name})>"
