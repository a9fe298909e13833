"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- chat/ → list_chat_messages, list_user_chats
"""

from messaging.application.queries.chat import (
    ListChatMessagesQuery,
    ListChatMessagesHandler,
    ListChatMessagesResult,
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
