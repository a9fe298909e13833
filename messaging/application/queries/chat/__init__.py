"""Chat-related queries."""

from messaging.application.queries.chat.list_chat_messages import (
    ListChatMessagesQuery,
    ListChatMessagesHandler,
    ListChatMessagesResult,
)
from messaging.application.queries.chat.list_user_chats import (
    ListUserChatsQuery,
    ListUserChatsHandler,
    ListUserChatsResult,
)

__all__ = [
    "ListChatMessagesQuery",
    "ListChatMessagesHandler",
    "ListChatMessagesResult",
    "ListUserChatsQuery",
    "ListUserChatsHandler",
    "ListUserChatsResult",
]
