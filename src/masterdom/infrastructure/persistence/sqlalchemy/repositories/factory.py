"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.infrastructure.persistence.sqlalchemy.adapters import (
    SqlAlchemyChatReadAdapter,
    SqlAlchemyOfferReadAdapter,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.category import (
    CategoryRepositorySQLAlchemy,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.chat import (
    ConversationRepositorySQLAlchemy,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.offer import (
    OfferRepositorySQLAlchemy,
    OfferResponseRepositorySQLAlchemy,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from masterdom.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    One factory per request; every repository it hands out shares the
    request's session, so a router's single commit covers all of them.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_context: Optional[UserContext] = None,
    ):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._offer_repo: OfferRepositorySQLAlchemy | None = None
        self._response_repo: OfferResponseRepositorySQLAlchemy | None = None
        self._conversation_repo: ConversationRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._offer_read_adapter: SqlAlchemyOfferReadAdapter | None = None
        self._chat_read_adapter: SqlAlchemyChatReadAdapter | None = None

    @property
    def user_context(self) -> Optional[UserContext]:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def offer_repository(self) -> OfferRepositorySQLAlchemy:
        if self._offer_repo is None:
            self._offer_repo = OfferRepositorySQLAlchemy(self._session)
        return self._offer_repo

    def offer_response_repository(self) -> OfferResponseRepositorySQLAlchemy:
        if self._response_repo is None:
            self._response_repo = OfferResponseRepositorySQLAlchemy(self._session)
        return self._response_repo

    def conversation_repository(self) -> ConversationRepositorySQLAlchemy:
        if self._conversation_repo is None:
            self._conversation_repo = ConversationRepositorySQLAlchemy(self._session)
        return self._conversation_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo

    def offer_read_port(self) -> SqlAlchemyOfferReadAdapter:
        if self._offer_read_adapter is None:
            self._offer_read_adapter = SqlAlchemyOfferReadAdapter(self._session)
        return self._offer_read_adapter

    def chat_read_port(self) -> SqlAlchemyChatReadAdapter:
        if self._chat_read_adapter is None:
            self._chat_read_adapter = SqlAlchemyChatReadAdapter(self._session)
        return self._chat_read_adapter
