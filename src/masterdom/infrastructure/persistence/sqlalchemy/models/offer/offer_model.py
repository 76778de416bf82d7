"""SQLAlchemy model for offers."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from masterdom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class OfferModel(Base, TimestampMixin):
    """
    Offer catalog row.

    Deleting the author deletes their offers; deleting a category leaves
    its offers uncategorised.
    """

    __tablename__ = "offers"

    __table_args__ = (
        Index("ix_offers_active_created", "is_active", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    offer_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<OfferModel(id={self.id}, title={self.title}, type={self.offer_type})>"
