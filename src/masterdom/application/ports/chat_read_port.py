"""Chat read port."""

from __future__ import annotations

from typing import Optional, Protocol
from uuid import UUID

from masterdom.application.dtos.chat import (
    ConversationDetailsDTO,
    ConversationPreviewDTO,
    MessageDTO,
)


class ChatReadPort(Protocol):
    """Read-side interface for conversations and messages."""

    async def list_conversations(self, user_id: UUID) -> list[ConversationPreviewDTO]:
        """Previews for every conversation of a user, most recently active first."""
        ...

    async def get_details(self, conversation_id: int) -> Optional[ConversationDetailsDTO]:
        """Offer title and participant profiles of a conversation."""
        ...

    async def list_messages(self, conversation_id: int) -> list[MessageDTO]:
        """All messages of a conversation, oldest first."""
        ...

    async def get_message(self, message_id: int) -> Optional[MessageDTO]:
        """One message projected with the sender's first name."""
        ...
