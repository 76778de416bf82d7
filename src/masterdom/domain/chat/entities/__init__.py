from masterdom.domain.chat.entities.conversation import Conversation
from masterdom.domain.chat.entities.message import Message

__all__ = ["Conversation", "Message"]
