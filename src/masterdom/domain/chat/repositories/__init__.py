from masterdom.domain.chat.repositories.conversation_repository import (
    ConversationRepository,
)

__all__ = ["ConversationRepository"]
