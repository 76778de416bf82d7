"""SQLAlchemy implementation of ConversationRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from masterdom.domain.chat import (
    Conversation,
    ConversationRepository,
    Message,
    ParticipantPair,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.chat import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class ConversationRepositorySQLAlchemy(ConversationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, conversation_id: int) -> Optional[Conversation]:
        model = await self._session.get(ConversationModel, conversation_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_for_pair(
        self,
        offer_id: int,
        participants: ParticipantPair,
    ) -> Optional[Conversation]:
        stmt = select(ConversationModel).where(
            ConversationModel.offer_id == offer_id,
            ConversationModel.user_low_id == participants.low,
            ConversationModel.user_high_id == participants.high,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._map_to_domain(model)

    async def get_or_create(
        self,
        offer_id: int,
        participants: ParticipantPair,
    ) -> tuple[Conversation, bool]:
        existing = await self.find_for_pair(offer_id, participants)
        if existing is not None:
            return existing, False

        model = ConversationModel(
            offer_id=offer_id,
            user_low_id=participants.low,
            user_high_id=participants.high,
            participants=[
                ConversationParticipantModel(user_id=participants.low),
                ConversationParticipantModel(user_id=participants.high),
            ],
        )
        self._session.add(model)
        try:
            # Conversation and both participant rows go out in one flush
            await self._session.flush()
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            # Lost the race: discard our unit and return the winner's row.
            # Nothing else is written before this call in the same request.
            await self._session.rollback()
            logger.debug(
                "Concurrent initiate on offer %s; reusing existing conversation",
                offer_id,
            )
            existing = await self.find_for_pair(offer_id, participants)
            if existing is None:
                raise
            return existing, False

        return self._map_to_domain(model), True

    async def add_message(self, message: Message) -> Message:
        model = MessageModel(
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            content=message.content,
            is_read=message.is_read,
            created_at=message.created_at,
        )
        self._session.add(model)
        await self._session.flush()

        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            sender_id=model.sender_id,
            content=model.content,
            is_read=model.is_read,
            created_at=model.created_at,
        )

    def _map_to_domain(self, model: ConversationModel) -> Conversation:
        return Conversation(
            id=model.id,
            offer_id=model.offer_id,
            participants=ParticipantPair(model.user_low_id, model.user_high_id),
            created_at=model.created_at,
        )
