from __future__ import annotations

from typing import TYPE_CHECKING

from masterdom.application.dtos.chat import ConversationPreviewDTO

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory
    from masterdom.application.ports import ChatReadPort


class ListConversationsQuery:
    """Conversation previews for the current user, most recent first."""

    def __init__(self, chat_read_port: ChatReadPort, current_user: UserContext):
        self._chat_read = chat_read_port
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListConversationsQuery:
        return cls(
            chat_read_port=factory.chat_read_port(),
            current_user=factory.user_context,
        )

    async def execute(self) -> list[ConversationPreviewDTO]:
        return await self._chat_read.list_conversations(self._user_id)
