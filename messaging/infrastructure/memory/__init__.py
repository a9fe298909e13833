"""
In-memory repositories.

List-backed implementations of the repository ports. They evaluate the
domain criteria directly, so they are the reference for what a database
adapter must return.
"""

from messaging.infrastructure.memory.in_memory_repository import InMemoryRecordRepository
from messaging.infrastructure.memory.in_memory_chat_message_repository import (
    InMemoryChatMessageRepository,
)
from messaging.infrastructure.memory.in_memory_chat_room_repository import (
    InMemoryChatRoomRepository,
)

__all__ = [
    "InMemoryRecordRepository",
    "InMemoryChatMessageRepository",
    "InMemoryChatRoomRepository",
]
