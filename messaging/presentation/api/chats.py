"""
Chats API Router - FastAPI endpoints for listing chat rooms and their messages.

Thin layer: only handles HTTP concerns (request/response).
Handlers are injected by Dishka; validation lives in the handlers.

Flow:
  HTTP Request → Router → Query → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from messaging.application.dto.chat import ChatMessageDTO, ChatRoomDTO
from messaging.application.queries.chat import (
    ListChatMessagesHandler,
    ListChatMessagesQuery,
    ListUserChatsHandler,
    ListUserChatsQuery,
)
from messaging.domain.exceptions import InvalidArgumentError
from messaging.presentation.dependencies.identity import (
    CallerIdentity,
    get_current_user,
)


# ==================== RESPONSE MODELS ====================


class ListChatMessagesResponse(BaseModel):
    """
    {
        "pages": 3,
        "messages": [
            {"id": "...", "chat_id": "...", "text": "...", "created_at": "ISO", "created_by": "..."},
            ...
        ]
    }
    """

    pages: int
    messages: list[ChatMessageDTO]


class ListUserChatsResponse(BaseModel):
    pages: int
    chats: list[ChatRoomDTO]


# ==================== ROUTER ====================

router = APIRouter(prefix="/chats", tags=["chats"])


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=ListUserChatsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_user_chats(
    handler: FromDishka[ListUserChatsHandler],
    current_user: CallerIdentity = Depends(get_current_user),
    page: int = 1,
):
    """List the chat rooms where the caller is host or customer."""
    try:
        result = await handler.execute(
            ListUserChatsQuery(user=current_user.as_user(), page=page)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        ) from e

    return ListUserChatsResponse(pages=result.pages, chats=result.chats)


@router.get(
    "/{chat_id}/messages",
    response_model=ListChatMessagesResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_chat_messages(
    chat_id: str,
    handler: FromDishka[ListChatMessagesHandler],
    current_user: CallerIdentity = Depends(get_current_user),
    page: int = 1,
):
    """List one page of a chat room's messages, most recent first."""
    try:
        result = await handler.execute(ListChatMessagesQuery(chat_id=chat_id, page=page))
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        ) from e

    return ListChatMessagesResponse(pages=result.pages, messages=result.messages)
