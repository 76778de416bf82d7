"""SQLAlchemy implementation of ChatReadPort."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from masterdom.application.dtos.chat import (
    ConversationDetailsDTO,
    ConversationPreviewDTO,
    MessageDTO,
    ParticipantProfileDTO,
)
from masterdom.application.ports import ChatReadPort
from masterdom.infrastructure.persistence.sqlalchemy.models import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
    OfferModel,
    ProfileModel,
)


class SqlAlchemyChatReadAdapter(ChatReadPort):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_conversations(self, user_id: UUID) -> list[ConversationPreviewDTO]:
        me = aliased(ConversationParticipantModel)
        other = aliased(ConversationParticipantModel)

        latest_content = (
            select(MessageModel.content)
            .where(MessageModel.conversation_id == ConversationModel.id)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .limit(1)
            .correlate(ConversationModel)
            .scalar_subquery()
        )
        latest_at = (
            select(func.max(MessageModel.created_at))
            .where(MessageModel.conversation_id == ConversationModel.id)
            .correlate(ConversationModel)
            .scalar_subquery()
        )
        last_activity = func.coalesce(latest_at, ConversationModel.created_at).label(
            "last_activity_at",
        )

        stmt = (
            select(
                ConversationModel.id,
                ConversationModel.offer_id,
                OfferModel.title,
                other.user_id,
                ProfileModel.first_name,
                latest_content.label("last_message"),
                last_activity,
            )
            .select_from(ConversationModel)
            .join(
                me,
                and_(me.conversation_id == ConversationModel.id, me.user_id == user_id),
            )
            .join(
                other,
                and_(
                    other.conversation_id == ConversationModel.id,
                    other.user_id != user_id,
                ),
            )
            .join(OfferModel, OfferModel.id == ConversationModel.offer_id)
            .join(ProfileModel, ProfileModel.user_id == other.user_id)
            .order_by(last_activity.desc(), ConversationModel.id.desc())
        )
        result = await self._session.execute(stmt)

        return [
            ConversationPreviewDTO(
                conversation_id=row.id,
                offer_id=row.offer_id,
                offer_title=row.title,
                other_participant_id=row.user_id,
                other_participant_name=row.first_name,
                last_message=row.last_message,
                last_activity_at=row.last_activity_at,
            )
            for row in result.all()
        ]

    async def get_details(self, conversation_id: int) -> Optional[ConversationDetailsDTO]:
        head_stmt = (
            select(ConversationModel, OfferModel.title)
            .join(OfferModel, OfferModel.id == ConversationModel.offer_id)
            .where(ConversationModel.id == conversation_id)
        )
        head = (await self._session.execute(head_stmt)).first()
        if head is None:
            return None
        conversation, offer_title = head

        profiles_stmt = (
            select(ProfileModel)
            .join(
                ConversationParticipantModel,
                ConversationParticipantModel.user_id == ProfileModel.user_id,
            )
            .where(ConversationParticipantModel.conversation_id == conversation_id)
            .order_by(ProfileModel.first_name, ProfileModel.user_id)
        )
        profiles = (await self._session.execute(profiles_stmt)).scalars().all()

        return ConversationDetailsDTO(
            conversation_id=conversation.id,
            offer_id=conversation.offer_id,
            offer_title=offer_title,
            created_at=conversation.created_at,
            participants=[
                ParticipantProfileDTO(
                    user_id=p.user_id,
                    first_name=p.first_name,
                    last_name=p.last_name,
                    phone_number=p.phone_number,
                    bio=p.bio,
                    years_of_experience=p.years_of_experience,
                    average_rating=p.average_rating,
                )
                for p in profiles
            ],
        )

    async def list_messages(self, conversation_id: int) -> list[MessageDTO]:
        stmt = (
            self._message_select()
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_dto(message, name) for message, name in result.all()]

    async def get_message(self, message_id: int) -> Optional[MessageDTO]:
        stmt = self._message_select().where(MessageModel.id == message_id)
        row = (await self._session.execute(stmt)).first()
        if row is None:
            return None
        return self._to_dto(row[0], row[1])

    @staticmethod
    def _message_select():
        return select(MessageModel, ProfileModel.first_name).join(
            ProfileModel,
            ProfileModel.user_id == MessageModel.sender_id,
        )

    @staticmethod
    def _to_dto(message: MessageModel, sender_first_name: str) -> MessageDTO:
        return MessageDTO(
            id=message.id,
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            sender_first_name=sender_first_name,
            content=message.content,
            created_at=message.created_at,
            is_read=message.is_read,
        )
