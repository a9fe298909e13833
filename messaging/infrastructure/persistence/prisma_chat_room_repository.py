"""
Prisma Chat Room Repository Implementation.

Prisma ChatRoom Model (from prisma/schema.prisma):
    model ChatRoom {
        id          String    @id @default(uuid())
        booking_id  String?
        host_id     String
        customer_id String
        created_at  DateTime  @default(now())
        updated_at  DateTime  @updatedAt
        deleted_at  DateTime?
    }

Mapping:
- ChatRoomCriteria(participant_id) →
    where={"OR": [{"host_id": id}, {"customer_id": id}], "deleted_at": None}
"""

from typing import Any, Optional, Sequence
from prisma import Prisma
from messaging.domain.ports.repositories import ChatRoomRepository
from messaging.domain.value_objects.criteria import ChatRoomCriteria
from messaging.domain.value_objects.pagination import PageWindow, SortOrder


class PrismaChatRoomRepository(ChatRoomRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @staticmethod
    def _where(criteria: ChatRoomCriteria) -> dict[str, Any]:
        user_id = criteria.participant_id.value
        return {
            "OR": [{"host_id": user_id}, {"customer_id": user_id}],
            "deleted_at": None,
        }

    async def count_matching(self, criteria: ChatRoomCriteria) -> int:
        return await self._prisma.chatroom.count(where=self._where(criteria))

    async def find_matching(
        self,
        criteria: ChatRoomCriteria,
        projection: Sequence[str],
        sort: SortOrder,
        window: PageWindow,
    ) -> Optional[list[dict[str, Any]]]:
        """Get one page of the user's non-deleted chat rooms."""
        records = await self._prisma.chatroom.find_many(
            where=self._where(criteria),
            order={sort.field: "desc" if sort.descending else "asc"},
            skip=window.offset,
            take=window.limit,
        )
        include = set(projection)
        return [record.model_dump(include=include) for record in records]
