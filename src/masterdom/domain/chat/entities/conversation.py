"""Conversation entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from masterdom.domain.chat.exceptions import NotAParticipantError
from masterdom.domain.chat.value_objects import ParticipantPair
from masterdom.domain.shared.time import utc_now


class Conversation:
    """
    A two-party message thread scoped to one offer.

    There is at most one conversation per (offer, unordered participant
    pair). Participants are fixed at creation; the only state is Active.
    """

    def __init__(
        self,
        offer_id: int,
        participants: ParticipantPair,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id
        self._offer_id = offer_id
        self._participants = participants
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def offer_id(self) -> int:
        return self._offer_id

    @property
    def participants(self) -> ParticipantPair:
        return self._participants

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def has_participant(self, user_id: UUID) -> bool:
        return user_id in self._participants

    def ensure_participant(self, user_id: UUID) -> None:
        if not self.has_participant(user_id):
            raise NotAParticipantError(self._id or 0)

    def __repr__(self) -> str:
        return (
            f"Conversation(id={self._id}, offer_id={self._offer_id}, "
            f"participants={self._participants.as_tuple()})"
        )
