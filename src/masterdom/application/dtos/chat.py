"""DTOs for conversations and messages (read models)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class ConversationPreviewDTO:
    """One entry of a user's conversation list."""

    conversation_id: int
    offer_id: int
    offer_title: str
    other_participant_id: UUID
    other_participant_name: str
    last_message: Optional[str]
    # Latest message time, or the conversation's creation time if empty
    last_activity_at: datetime


@dataclass(frozen=True)
class ParticipantProfileDTO:
    """Public profile of a conversation participant."""

    user_id: UUID
    first_name: str
    last_name: Optional[str]
    phone_number: Optional[str]
    bio: Optional[str]
    years_of_experience: Optional[int]
    average_rating: Optional[float]


@dataclass(frozen=True)
class ConversationDetailsDTO:
    """Conversation header: offer context plus both participants."""

    conversation_id: int
    offer_id: int
    offer_title: str
    created_at: datetime
    participants: list[ParticipantProfileDTO] = field(default_factory=list)


@dataclass(frozen=True)
class MessageDTO:
    """A message projected with the sender's display name."""

    id: int
    conversation_id: int
    sender_id: UUID
    sender_first_name: str
    content: str
    created_at: datetime
    is_read: bool
