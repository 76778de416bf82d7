"""Open (or reuse) a conversation about an offer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from masterdom.domain.chat import Conversation, ConversationRepository, ParticipantPair
from masterdom.domain.offer import OfferNotFoundError, OfferRepository
from masterdom.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from masterdom.application.context import UserContext
    from masterdom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class InitiateConversationCommand:
    """
    Return the conversation between the current user and a recipient.

    Idempotent: at most one conversation exists per offer and unordered
    participant pair, so repeated or concurrent calls resolve to the same
    conversation.
    """

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        offer_repository: OfferRepository,
        user_repository: UserRepository,
        current_user: UserContext,
    ):
        self._conversation_repo = conversation_repository
        self._offer_repo = offer_repository
        self._user_repo = user_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> InitiateConversationCommand:
        return cls(
            conversation_repository=factory.conversation_repository(),
            offer_repository=factory.offer_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.user_context,
        )

    async def execute(
        self,
        offer_id: int,
        recipient_id: UUID,
    ) -> tuple[Conversation, bool]:
        """
        Returns
        -------
        The conversation and True when this call created it
        """
        # Raises CannotChatWithSelfError before any lookup
        participants = ParticipantPair.of(self._user_id, recipient_id)

        if await self._offer_repo.find_by_id(offer_id) is None:
            raise OfferNotFoundError(offer_id)
        if await self._user_repo.find_by_id(recipient_id) is None:
            raise UserNotFoundError(str(recipient_id))

        conversation, created = await self._conversation_repo.get_or_create(
            offer_id,
            participants,
        )
        if created:
            logger.info(
                "Conversation %s opened on offer %s by %s",
                conversation.id,
                offer_id,
                self._user_id,
            )
        return conversation, created
