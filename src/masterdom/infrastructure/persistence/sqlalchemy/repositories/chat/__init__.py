from masterdom.infrastructure.persistence.sqlalchemy.repositories.chat.conversation_repository import (  # NOQA: E501
    ConversationRepositorySQLAlchemy,
)

__all__ = ["ConversationRepositorySQLAlchemy"]
