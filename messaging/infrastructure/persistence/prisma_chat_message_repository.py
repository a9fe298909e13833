"""
Prisma Chat Message Repository Implementation.

Prisma ChatMessage Model (from prisma/schema.prisma):
    model ChatMessage {
        id         String    @id @default(uuid())
        chat_id    String
        text       String
        created_at DateTime  @default(now())
        created_by String
        deleted_at DateTime?
    }

Mapping:
- MessageCriteria(chat_id) → where={"chat_id": ..., "deleted_at": None}
- SortOrder → order={field: "desc" | "asc"}
- PageWindow → skip / take
- projection → record.model_dump(include=...)
"""

from typing import Any, Optional, Sequence
from prisma import Prisma
from prisma.models import ChatMessage as PrismaChatMessage
from messaging.domain.ports.repositories import ChatMessageRepository
from messaging.domain.value_objects.criteria import MessageCriteria
from messaging.domain.value_objects.pagination import PageWindow, SortOrder


class PrismaChatMessageRepository(ChatMessageRepository):
    """
    Prisma implementation of ChatMessageRepository.

    Reads ChatMessage rows from PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    @staticmethod
    def _where(criteria: MessageCriteria) -> dict[str, Any]:
        return {"chat_id": criteria.chat_id.value, "deleted_at": None}

    @staticmethod
    def _to_record(
        record: PrismaChatMessage, projection: Sequence[str]
    ) -> dict[str, Any]:
        """Keep only the projected fields of a Prisma record."""
        return record.model_dump(include=set(projection))

    async def count_matching(self, criteria: MessageCriteria) -> int:
        return await self._prisma.chatmessage.count(where=self._where(criteria))

    async def find_matching(
        self,
        criteria: MessageCriteria,
        projection: Sequence[str],
        sort: SortOrder,
        window: PageWindow,
    ) -> Optional[list[dict[str, Any]]]:
        """Get one page of non-deleted messages of a chat room."""
        records = await self._prisma.chatmessage.find_many(
            where=self._where(criteria),
            order={sort.field: "desc" if sort.descending else "asc"},
            skip=window.offset,
            take=window.limit,
        )
        return [self._to_record(record, projection) for record in records]
