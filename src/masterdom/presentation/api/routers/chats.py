"""Chats router: conversations between users about an offer."""

import logging

from fastapi import APIRouter, Response, status

from masterdom.application.commands.chat import (
    InitiateConversationCommand,
    PostMessageCommand,
)
from masterdom.application.queries.chat import (
    GetConversationDetailsQuery,
    ListConversationsQuery,
    ListMessagesQuery,
)
from masterdom.presentation.api.dependencies import RepoFactory
from masterdom.presentation.api.schemas.chat import (
    ConversationDetailsResponse,
    ConversationPreviewResponse,
    InitiateChatRequest,
    InitiateChatResponse,
    MessageResponse,
    PostMessageRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List own conversations")
async def list_conversations(factory: RepoFactory) -> list[ConversationPreviewResponse]:
    """Previews ordered by last activity, most recent first."""
    previews = await ListConversationsQuery.from_factory(factory).execute()
    return [ConversationPreviewResponse.model_validate(p) for p in previews]


@router.post(
    "/initiate",
    status_code=status.HTTP_201_CREATED,
    summary="Start or reuse a conversation",
    responses={
        200: {"description": "Existing conversation returned"},
        201: {"description": "Conversation created"},
        400: {"description": "Cannot chat with yourself"},
        404: {"description": "Offer or recipient not found"},
    },
)
async def initiate_conversation(
    request: InitiateChatRequest,
    factory: RepoFactory,
    response: Response,
) -> InitiateChatResponse:
    command = InitiateConversationCommand.from_factory(factory)
    conversation, created = await command.execute(
        offer_id=request.offer_id,
        recipient_id=request.recipient_id,
    )
    await factory.session.commit()

    if not created:
        response.status_code = status.HTTP_200_OK
    return InitiateChatResponse(conversation_id=conversation.id, created=created)


@router.get(
    "/{conversation_id}",
    summary="Conversation details",
    responses={
        403: {"description": "Not a participant"},
        404: {"description": "Conversation not found"},
    },
)
async def get_conversation(
    conversation_id: int,
    factory: RepoFactory,
) -> ConversationDetailsResponse:
    details = await GetConversationDetailsQuery.from_factory(factory).execute(
        conversation_id,
    )
    return ConversationDetailsResponse.model_validate(details)


@router.get(
    "/{conversation_id}/messages",
    summary="List messages",
    responses={
        403: {"description": "Not a participant"},
        404: {"description": "Conversation not found"},
    },
)
async def list_messages(
    conversation_id: int,
    factory: RepoFactory,
) -> list[MessageResponse]:
    messages = await ListMessagesQuery.from_factory(factory).execute(conversation_id)
    return [MessageResponse.model_validate(m) for m in messages]


@router.post(
    "/{conversation_id}/messages",
    status_code=status.HTTP_201_CREATED,
    summary="Post a message",
    responses={
        400: {"description": "Empty message"},
        403: {"description": "Not a participant"},
        404: {"description": "Conversation not found"},
    },
)
async def post_message(
    conversation_id: int,
    request: PostMessageRequest,
    factory: RepoFactory,
) -> MessageResponse:
    command = PostMessageCommand.from_factory(factory)
    message = await command.execute(conversation_id, request.content)
    await factory.session.commit()

    return MessageResponse.model_validate(message)
