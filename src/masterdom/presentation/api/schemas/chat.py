"""Conversation and message schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class InitiateChatRequest(BaseModel):
    offer_id: int
    recipient_id: UUID


class InitiateChatResponse(BaseModel):
    conversation_id: int
    created: bool


class ConversationPreviewResponse(BaseModel):
    conversation_id: int
    offer_id: int
    offer_title: str
    other_participant_id: UUID
    other_participant_name: str
    last_message: Optional[str]
    last_activity_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ParticipantResponse(BaseModel):
    user_id: UUID
    first_name: str
    last_name: Optional[str]
    phone_number: Optional[str]
    bio: Optional[str]
    years_of_experience: Optional[int]
    average_rating: Optional[float]

    model_config = ConfigDict(from_attributes=True)


class ConversationDetailsResponse(BaseModel):
    conversation_id: int
    offer_id: int
    offer_title: str
    created_at: datetime
    participants: list[ParticipantResponse]

    model_config = ConfigDict(from_attributes=True)


class PostMessageRequest(BaseModel):
    content: str = Field(..., max_length=5000)


class MessageResponse(BaseModel):
    id: int
    conversation_id: int
    sender_id: UUID
    sender_first_name: str
    content: str
    created_at: datetime
    is_read: bool

    model_config = ConfigDict(from_attributes=True)
