"""Conversation registry commands."""

from masterdom.application.commands.chat.initiate_conversation_command import (
    InitiateConversationCommand,
)
from masterdom.application.commands.chat.post_message_command import (
    PostMessageCommand,
)

__all__ = ["InitiateConversationCommand", "PostMessageCommand"]
