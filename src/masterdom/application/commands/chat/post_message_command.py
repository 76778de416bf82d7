from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.chat import MessageDTO
from masterdom.domain.chat import (
    ConversationNotFoundError,
    ConversationRepository,
    Message,
)

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory
    from masterdom.application.ports import ChatReadPort


class PostMessageCommand:
    """Append a message to a conversation the current user takes part in."""

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        chat_read_port: ChatReadPort,
        current_user: UserContext,
    ):
        self._conversation_repo = conversation_repository
        self._chat_read = chat_read_port
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PostMessageCommand:
        return cls(
            conversation_repository=factory.conversation_repository(),
            chat_read_port=factory.chat_read_port(),
            current_user=factory.user_context,
        )

    async def execute(self, conversation_id: int, content: str) -> MessageDTO:
        conversation = await self._conversation_repo.find_by_id(conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(conversation_id)
        conversation.ensure_participant(self._user_id)

        message = Message(
            conversation_id=conversation_id,
            sender_id=self._user_id,
            content=content,
        )
        message = await self._conversation_repo.add_message(message)

        dto = await self._chat_read.get_message(message.id)
        if dto is None:
            msg = f"Message {message.id} vanished after insert"
            raise RuntimeError(msg)
        return dto
