"""SQLAlchemy model for offer responses."""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from masterdom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class OfferResponseModel(Base, TimestampMixin):
    """Response ledger row. One per (offer, applicant)."""

    __tablename__ = "offer_responses"

    __table_args__ = (
        UniqueConstraint(
            "offer_id",
            "applicant_id",
            name="uq_offer_response_offer_applicant",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    offer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("offers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")

    def __repr__(self) -> str:
        return (
            f"<OfferResponseModel(id={self.id}, offer_id={self.offer_id}, "
            f"applicant_id={self.applicant_id})>"
        )
