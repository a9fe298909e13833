"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from messaging.domain.value_objects.chat_room_id import ChatRoomId
from messaging.domain.value_objects.user_id import UserId
from messaging.domain.value_objects.pagination import PageWindow, SortOrder
from messaging.domain.value_objects.criteria import ChatRoomCriteria, MessageCriteria

__all__ = [
    "ChatRoomId",
    "UserId",
    "PageWindow",
    "SortOrder",
    "MessageCriteria",
    "ChatRoomCriteria",
]
