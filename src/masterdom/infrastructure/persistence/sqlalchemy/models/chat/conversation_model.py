"""SQLAlchemy models for conversations and their participants."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from masterdom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class ConversationModel(Base, CreatedAtMixin):
    """
    Conversation row.

    The participant pair is denormalised onto the row in sorted order
    (user_low_id < user_high_id) so the unique constraint covers the
    unordered pair per offer.
    """

    __tablename__ = "conversations"

    __table_args__ = (
        UniqueConstraint(
            "offer_id",
            "user_low_id",
            "user_high_id",
            name="uq_conversation_offer_pair",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    offer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("offers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_low_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_high_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    participants: Mapped[list[ConversationParticipantModel]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<ConversationModel(id={self.id}, offer_id={self.offer_id})>"


class ConversationParticipantModel(Base):
    """Membership row; exactly two per conversation, never updated."""

    __tablename__ = "conversation_participants"

    conversation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<ConversationParticipantModel(conversation_id={self.conversation_id}, "
            f"user_id={self.user_id})>"
        )
