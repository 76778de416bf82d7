"""Conversation registry domain."""

from masterdom.domain.chat.entities import Conversation, Message
from masterdom.domain.chat.exceptions import (
    CannotChatWithSelfError,
    ConversationNotFoundError,
    EmptyMessageError,
    NotAParticipantError,
)
from masterdom.domain.chat.repositories import ConversationRepository
from masterdom.domain.chat.value_objects import ParticipantPair

__all__ = [
    "CannotChatWithSelfError",
    "Conversation",
    "ConversationNotFoundError",
    "ConversationRepository",
    "EmptyMessageError",
    "Message",
    "NotAParticipantError",
    "ParticipantPair",
]
