"""
ENTITIES - Records owned by the store

The query layer only reads projections of these; it never creates,
updates or deletes them.
"""

from messaging.domain.entities.chat_message import ChatMessage
from messaging.domain.entities.chat_room import ChatRoom

__all__ = [
    "ChatMessage",
    "ChatRoom",
]
