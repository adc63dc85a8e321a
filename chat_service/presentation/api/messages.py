"""
Messages API Router.

GET  /messages                    → all messages, newest first
GET  /messages/channel/{channel}  → one channel, newest first (blank channel → 400)
POST /messages                    → post as the caller (bearer token required)

Message shape:
{
    "id": 7,
    "body": "hi",
    "user_id": 1,
    "attachments": [],
    "in_reply_to": null,
    "channel": "general",
    "created_at": "2025-01-27T12:00:00Z"
}
"""

from datetime import datetime
from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from chat_service.application.commands.messages import (
    PostMessageCommand,
    PostMessageHandler,
)
from chat_service.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from chat_service.domain.entities.message import Message
from chat_service.domain.exceptions import PersistenceError
from chat_service.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateMessageRequest(BaseModel):
    """
    Request body for posting a message.

    A user_id sent by the client is not part of the model and is dropped.
    """

    body: str = Field(min_length=1)
    channel: Optional[str] = None
    attachments: list[str] = Field(default_factory=list)
    in_reply_to: Optional[int] = None


class MessageResponse(BaseModel):
    id: int
    body: str
    user_id: int
    attachments: list[str]
    in_reply_to: Optional[int] = None
    channel: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id.value,
            body=message.body,
            user_id=message.user_id.value,
            attachments=list(message.attachments),
            in_reply_to=message.in_reply_to.value if message.in_reply_to else None,
            channel=message.channel,
            created_at=message.created_at,
        )


# ==================== ROUTER ====================

router = APIRouter(prefix="/messages", tags=["messages"])


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=list[MessageResponse],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(handler: FromDishka[ListMessagesHandler]):
    try:
        messages = await handler.execute(ListMessagesQuery())
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error retrieving messages",
        ) from e
    return [MessageResponse.from_entity(message) for message in messages]


@router.get("/channel/", include_in_schema=False)
async def list_channel_messages_without_channel():
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail="Channel not specified"
    )


@router.get(
    "/channel/{channel}",
    response_model=list[MessageResponse],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_channel_messages(
    channel: str,
    handler: FromDishka[ListMessagesHandler],
):
    """List one channel. The path segment arrives already percent-decoded."""
    if not channel.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Channel not specified"
        )
    try:
        messages = await handler.execute(ListMessagesQuery(channel=channel))
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error retrieving channel messages",
        ) from e
    return [MessageResponse.from_entity(message) for message in messages]


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    request: CreateMessageRequest,
    handler: FromDishka[PostMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = PostMessageCommand(
        user_id=current_user.user_id,
        body=request.body,
        channel=request.channel,
        attachments=request.attachments,
        in_reply_to=request.in_reply_to,
    )
    try:
        message = await handler.execute(command)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error adding message",
        ) from e

    logger.info(
        f"User {current_user.user_id} posted message {message.id} to {message.channel!r}"
    )
    return MessageResponse.from_entity(message)
