"""
Query Criteria - Filters the use cases hand to repositories.

Soft-deleted records never match. Adapters that can evaluate Python
predicates (in-memory) call matches(); database adapters translate the
fields into their own query language.
"""

from dataclasses import dataclass

from messaging.domain.entities.chat_message import ChatMessage
from messaging.domain.entities.chat_room import ChatRoom
from messaging.domain.value_objects.chat_room_id import ChatRoomId
from messaging.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class MessageCriteria:
    """Non-deleted messages of one chat room."""

    chat_id: ChatRoomId

    def matches(self, message: ChatMessage) -> bool:
        return message.chat_id == self.chat_id.value and not message.is_deleted


@dataclass(frozen=True)
class ChatRoomCriteria:
    """Non-deleted chat rooms where the user is host or customer."""

    participant_id: UserId

    def matches(self, room: ChatRoom) -> bool:
        return room.has_participant(self.participant_id.value) and not room.is_deleted
