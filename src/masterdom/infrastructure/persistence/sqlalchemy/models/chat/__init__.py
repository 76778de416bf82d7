from masterdom.infrastructure.persistence.sqlalchemy.models.chat.conversation_model import (  # NOQA: E501
    ConversationModel,
    ConversationParticipantModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.chat.message_model import (
    MessageModel,
)

__all__ = ["ConversationModel", "ConversationParticipantModel", "MessageModel"]
