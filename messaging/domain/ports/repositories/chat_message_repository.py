"""
Chat Message Repository Port - Interface for reading chat messages.
Implementations:
- messaging/infrastructure/persistence/prisma_chat_message_repository.py
- messaging/infrastructure/memory/in_memory_chat_message_repository.py
"""

from messaging.domain.ports.repositories.record_repository import RecordRepository
from messaging.domain.value_objects.criteria import MessageCriteria


class ChatMessageRepository(RecordRepository[MessageCriteria]):
    pass
