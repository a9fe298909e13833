"""
REPOSITORY PORTS - Record store interfaces

Each repository port:
- Is an abstract base class (ABC)
- Exposes only filtered count and paginated fetch
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from messaging.domain.ports.repositories.record_repository import RecordRepository
from messaging.domain.ports.repositories.chat_message_repository import (
    ChatMessageRepository,
)
from messaging.domain.ports.repositories.chat_room_repository import (
    ChatRoomRepository,
)

__all__ = [
    "RecordRepository",
    "ChatMessageRepository",
    "ChatRoomRepository",
]
