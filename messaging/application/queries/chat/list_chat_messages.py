"""
ListChatMessages Query - One page of the messages posted in a chat room.

Most recent messages come first. Soft-deleted messages are never listed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from messaging.application.common.interfaces import Query, QueryHandler
from messaging.application.common.pagination import page_window, validate_page
from messaging.application.common.read_policy import read_page_or_empty
from messaging.application.dto.chat import MESSAGE_PROJECTION, ChatMessageDTO
from messaging.domain.exceptions import InvalidArgumentError, MissingDependencyError
from messaging.domain.ports.repositories import ChatMessageRepository
from messaging.domain.value_objects.chat_room_id import ChatRoomId
from messaging.domain.value_objects.criteria import MessageCriteria
from messaging.domain.value_objects.pagination import SortOrder

logger = logging.getLogger(__name__)

NEWEST_FIRST = SortOrder(field="created_at", descending=True)


@dataclass
class ListChatMessagesResult:
    """Page count and the messages of the requested page."""

    pages: int
    messages: list[ChatMessageDTO] = field(default_factory=list)


@dataclass(frozen=True)
class ListChatMessagesQuery(Query[ListChatMessagesResult]):
    """
    Query to list the messages of a chat room.

    Args:
        chat_id: Chat room ID (non-empty string)
        page: 1-based page number
    """

    chat_id: Any
    page: Any = 1


class ListChatMessagesHandler(QueryHandler[ListChatMessagesResult]):
    """
    Handler for ListChatMessagesQuery.

    Raises MissingDependencyError at construction when no repository is given,
    and InvalidArgumentError from execute() for a malformed chat_id or page.
    Store failures are never raised: they read as an empty result.
    """

    def __init__(self, message_repository: ChatMessageRepository):
        if not message_repository:
            logger.error("[Messages] Message repository dependency has not been injected.")
            raise MissingDependencyError("Message repository is required")
        self._message_repository = message_repository

    async def execute(self, query: ListChatMessagesQuery) -> ListChatMessagesResult:
        # 1. Validate input before touching the store
        try:
            chat_id = ChatRoomId(query.chat_id)
            page = validate_page(query.page)
        except InvalidArgumentError as e:
            logger.error(f"[Messages] {e}")
            raise

        # 2. Read count + page together
        logger.info(f"[Messages] Getting messages of chat room #{chat_id}")
        read = await read_page_or_empty(
            self._message_repository,
            MessageCriteria(chat_id=chat_id),
            MESSAGE_PROJECTION,
            NEWEST_FIRST,
            page_window(page),
            context=f"messages of chat room #{chat_id}",
        )

        return ListChatMessagesResult(
            pages=read.pages,
            messages=[ChatMessageDTO.model_validate(r) for r in read.records],
        )
