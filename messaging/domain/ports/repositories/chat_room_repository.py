"""
Chat Room Repository Port - Interface for reading chat rooms.
Implementations:
- messaging/infrastructure/persistence/prisma_chat_room_repository.py
- messaging/infrastructure/memory/in_memory_chat_room_repository.py
"""

from messaging.domain.ports.repositories.record_repository import RecordRepository
from messaging.domain.value_objects.criteria import ChatRoomCriteria


class ChatRoomRepository(RecordRepository[ChatRoomCriteria]):
    pass
