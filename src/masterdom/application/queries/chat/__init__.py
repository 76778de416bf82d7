from masterdom.application.queries.chat.get_conversation_details_query import (
    GetConversationDetailsQuery,
)
from masterdom.application.queries.chat.list_conversations_query import (
    ListConversationsQuery,
)
from masterdom.application.queries.chat.list_messages_query import ListMessagesQuery

__all__ = [
    "GetConversationDetailsQuery",
    "ListConversationsQuery",
    "ListMessagesQuery",
]
