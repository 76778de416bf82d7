"""Conversation repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from masterdom.domain.chat.entities import Conversation, Message
from masterdom.domain.chat.value_objects import ParticipantPair


class ConversationRepository(ABC):
    """Repository interface for conversations and their messages."""

    @abstractmethod
    async def find_by_id(self, conversation_id: int) -> Optional[Conversation]:
        """Find a conversation with its participant pair."""

    @abstractmethod
    async def find_for_pair(
        self,
        offer_id: int,
        participants: ParticipantPair,
    ) -> Optional[Conversation]:
        """Find the conversation for an offer and an unordered user pair."""

    @abstractmethod
    async def get_or_create(
        self,
        offer_id: int,
        participants: ParticipantPair,
    ) -> tuple[Conversation, bool]:
        """
        Return the conversation for (offer, pair), creating it if absent.

        The conversation row and both participant rows are written as one
        unit. If a concurrent request created the same conversation first,
        the existing one is returned.

        Returns
        -------
        The conversation and whether it was created by this call
        """

    @abstractmethod
    async def add_message(self, message: Message) -> Message:
        """Append a message and return it with its store-assigned id."""
