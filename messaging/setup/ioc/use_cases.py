"""
Use-case provider - registers the query handlers.

Handlers ask for the repository PORTS (ChatMessageRepository,
ChatRoomRepository); whichever provider sits next to this one in the
container decides the implementation (Prisma in production, in-memory in
tests).
"""

from dishka import Provider, Scope, provide
from messaging.application.queries.chat import (
    ListChatMessagesHandler,
    ListUserChatsHandler,
)
from messaging.domain.ports.repositories import (
    ChatMessageRepository,
    ChatRoomRepository,
)


class UseCaseProvider(Provider):
    """Application use cases, one instance per request."""

    @provide(scope=Scope.REQUEST)
    def get_list_chat_messages_handler(
        self, message_repository: ChatMessageRepository
    ) -> ListChatMessagesHandler:
        return ListChatMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_user_chats_handler(
        self, chat_room_repository: ChatRoomRepository
    ) -> ListUserChatsHandler:
        return ListUserChatsHandler(chat_room_repository)
