"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from messaging.infrastructure.persistence.prisma_chat_message_repository import (
    PrismaChatMessageRepository,
)
from messaging.infrastructure.persistence.prisma_chat_room_repository import (
    PrismaChatRoomRepository,
)

__all__ = [
    "PrismaChatMessageRepository",
    "PrismaChatRoomRepository",
]
