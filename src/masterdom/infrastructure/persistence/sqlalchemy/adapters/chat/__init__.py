from masterdom.infrastructure.persistence.sqlalchemy.adapters.chat.sqlalchemy_chat_read_adapter import (  # NOQA: E501
    SqlAlchemyChatReadAdapter,
)

__all__ = ["SqlAlchemyChatReadAdapter"]
