from messaging.domain.entities.chat_room import ChatRoom
from messaging.domain.ports.repositories import ChatRoomRepository
from messaging.domain.value_objects.criteria import ChatRoomCriteria
from messaging.infrastructure.memory.in_memory_repository import InMemoryRecordRepository


class InMemoryChatRoomRepository(
    InMemoryRecordRepository[ChatRoom, ChatRoomCriteria], ChatRoomRepository
):
    """ChatRoomRepository over a Python list."""
