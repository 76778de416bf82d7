"""Unordered pair of conversation participants."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from masterdom.domain.chat.exceptions import CannotChatWithSelfError


@dataclass(frozen=True)
class ParticipantPair:
    """Two distinct users, stored in canonical (sorted) order.

    ``ParticipantPair.of(a, b) == ParticipantPair.of(b, a)``, which is what
    makes conversation lookup independent of who initiated it.
    """

    low: UUID
    high: UUID

    def __post_init__(self) -> None:
        if self.low == self.high:
            raise CannotChatWithSelfError
        if self.low.int > self.high.int:
            low, high = self.high, self.low
            object.__setattr__(self, "low", low)
            object.__setattr__(self, "high", high)

    @classmethod
    def of(cls, first: UUID, second: UUID) -> ParticipantPair:
        return cls(first, second)

    def __contains__(self, user_id: object) -> bool:
        return user_id in (self.low, self.high)

    def other(self, user_id: UUID) -> UUID:
        """Return the participant that is not ``user_id``."""
        if user_id == self.low:
            return self.high
        if user_id == self.high:
            return self.low
        msg = f"{user_id} is not part of this pair"
        raise ValueError(msg)

    def as_tuple(self) -> tuple[UUID, UUID]:
        return (self.low, self.high)
