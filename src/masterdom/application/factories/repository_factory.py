"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol

from masterdom.application.ports import ChatReadPort, OfferReadPort
from masterdom.domain.category import CategoryRepository
from masterdom.domain.chat import ConversationRepository
from masterdom.domain.offer import OfferRepository, OfferResponseRepository
from masterdom.domain.user import UserRepository

if TYPE_CHECKING:
    from masterdom.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one request's session."""

    @property
    def user_context(self) -> Optional[UserContext]:
        """The authenticated caller, or None on public endpoints."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def offer_repository(self) -> OfferRepository:
        """Get offer repository."""
        ...

    def offer_response_repository(self) -> OfferResponseRepository:
        """Get offer response repository."""
        ...

    def conversation_repository(self) -> ConversationRepository:
        """Get conversation repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def offer_read_port(self) -> OfferReadPort:
        """Get offer read port."""
        ...

    def chat_read_port(self) -> ChatReadPort:
        """Get chat read port."""
        ...
