from messaging.domain.entities.chat_message import ChatMessage
from messaging.domain.ports.repositories import ChatMessageRepository
from messaging.domain.value_objects.criteria import MessageCriteria
from messaging.infrastructure.memory.in_memory_repository import InMemoryRecordRepository


class InMemoryChatMessageRepository(
    InMemoryRecordRepository[ChatMessage, MessageCriteria], ChatMessageRepository
):
    """ChatMessageRepository over a Python list."""
