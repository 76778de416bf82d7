"""Message entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from masterdom.domain.chat.exceptions import EmptyMessageError
from masterdom.domain.shared.time import utc_now


class Message:
    """An append-only chat message."""

    def __init__(  # NOQA: PLR0913
        self,
        conversation_id: int,
        sender_id: UUID,
        content: str,
        is_read: bool = False,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ):
        if content is None or not content.strip():
            raise EmptyMessageError
        self._id = id
        self._conversation_id = conversation_id
        self._sender_id = sender_id
        self._content = content
        self._is_read = is_read
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def conversation_id(self) -> int:
        return self._conversation_id

    @property
    def sender_id(self) -> UUID:
        return self._sender_id

    @property
    def content(self) -> str:
        return self._content

    @property
    def is_read(self) -> bool:
        return self._is_read

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __repr__(self) -> str:
        return (
            f"Message(id={self._id}, conversation_id={self._conversation_id}, "
            f"sender_id={self._sender_id})"
        )
