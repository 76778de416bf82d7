"""Command layer. Write operations that change persisted state."""

from masterdom.application.commands.admin import (
    DeleteUserCommand,
    PromoteUserCommand,
    UpdateUserCommand,
)
from masterdom.application.commands.categories import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from masterdom.application.commands.chat import (
    InitiateConversationCommand,
    PostMessageCommand,
)
from masterdom.application.commands.offers import (
    CreateOfferCommand,
    DeleteOfferCommand,
    RespondToOfferCommand,
    SetOfferActiveCommand,
)
from masterdom.application.commands.user import UpdateProfileCommand

__all__ = [
    "CreateCategoryCommand",
    "CreateOfferCommand",
    "DeleteCategoryCommand",
    "DeleteOfferCommand",
    "DeleteUserCommand",
    "InitiateConversationCommand",
    "PostMessageCommand",
    "PromoteUserCommand",
    "RespondToOfferCommand",
    "SetOfferActiveCommand",
    "UpdateCategoryCommand",
    "UpdateProfileCommand",
    "UpdateUserCommand",
]
