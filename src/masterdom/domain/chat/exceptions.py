"""Chat domain exceptions."""

from masterdom.domain.shared.exceptions import (
    AuthorizationError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class ConversationNotFoundError(NotFoundError):
    """Conversation not found."""

    def __init__(self, conversation_id: int) -> None:
        self.conversation_id = conversation_id
        super().__init__(
            "Conversation not found",
            code=ErrorCode.CONVERSATION_NOT_FOUND,
            details={"conversation_id": conversation_id},
        )


class NotAParticipantError(AuthorizationError):
    """The user does not belong to the conversation."""

    def __init__(self, conversation_id: int) -> None:
        super().__init__(
            "You are not a participant of this conversation",
            code=ErrorCode.NOT_A_PARTICIPANT,
            details={"conversation_id": conversation_id},
        )


class CannotChatWithSelfError(ValidationError):
    """A conversation needs two distinct users."""

    def __init__(self) -> None:
        super().__init__(
            "You cannot start a conversation with yourself",
            code=ErrorCode.CANNOT_CHAT_WITH_SELF,
        )


class EmptyMessageError(ValidationError):
    """Message content is blank."""

    def __init__(self) -> None:
        super().__init__("Message content cannot be empty")
