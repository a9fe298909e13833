"""
ListUserChats Query - One page of the chat rooms a user takes part in.

A user takes part in a room as its host or as its customer. Rooms are
ordered by last activity (updated_at, newest first); soft-deleted rooms
are never listed.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from messaging.application.common.interfaces import Query, QueryHandler
from messaging.application.common.pagination import page_window, validate_page
from messaging.application.common.read_policy import read_page_or_empty
from messaging.application.dto.chat import CHAT_ROOM_PROJECTION, ChatRoomDTO
from messaging.domain.exceptions import InvalidArgumentError, MissingDependencyError
from messaging.domain.ports.repositories import ChatRoomRepository
from messaging.domain.value_objects.criteria import ChatRoomCriteria
from messaging.domain.value_objects.pagination import SortOrder
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

MISSING_USER_ID_MESSAGE = 'User does not contain the property "_id"'
EMPTY_USER_ID_MESSAGE = 'User property "_id" must not be empty'
RECENTLY_UPDATED_FIRST = SortOrder(field="updated_at", descending=True)


@dataclass
class ListUserChatsResult:
    """Page count and the chat rooms of the requested page."""

    pages: int
    chats: list[ChatRoomDTO] = field(default_factory=list)


@dataclass(frozen=True)
class ListUserChatsQuery(Query[ListUserChatsResult]):
    """
    Query to list the chat rooms of a user.

    Args:
        user: Caller identity, a mapping carrying "_id"
        page: 1-based page number
    """

    user: Any
    page: Any = 1


def _user_id(user: Any) -> UserId:
    if not isinstance(user, Mapping) or "_id" not in user:
        raise InvalidArgumentError(MISSING_USER_ID_MESSAGE)
    if user["_id"] is None:
        raise InvalidArgumentError(EMPTY_USER_ID_MESSAGE)
    try:
        return UserId(str(user["_id"]))
    except ValueError as e:
        raise InvalidArgumentError(EMPTY_USER_ID_MESSAGE) from e


class ListUserChatsHandler(QueryHandler[ListUserChatsResult]):
    def __init__(self, chat_room_repository: ChatRoomRepository):
        if not chat_room_repository:
            logger.error("[Messages] Chat room repository dependency has not been injected.")
            raise MissingDependencyError("Chat room repository is required")
        self._chat_room_repository = chat_room_repository

    async def execute(self, query: ListUserChatsQuery) -> ListUserChatsResult:
        try:
            user_id = _user_id(query.user)
            page = validate_page(query.page)
        except InvalidArgumentError as e:
            logger.error(f"[Messages] {e}")
            raise

        logger.info(f"[Messages] Listing chats for user {user_id}")
        read = await read_page_or_empty(
            self._chat_room_repository,
            ChatRoomCriteria(participant_id=user_id),
            CHAT_ROOM_PROJECTION,
            RECENTLY_UPDATED_FIRST,
            page_window(page),
            context=f"chats of user {user_id}",
        )

        return ListUserChatsResult(
            pages=read.pages,
            chats=[ChatRoomDTO.model_validate(r) for r in read.records],
        )
