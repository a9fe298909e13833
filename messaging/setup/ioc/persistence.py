"""
Persistence provider - Prisma client and Prisma-backed repositories.

Dishka concepts:
- Scope.APP = created ONCE when app starts, shared across all requests
- Scope.REQUEST = new instance per HTTP request
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma
from messaging.domain.ports.repositories import (
    ChatMessageRepository,
    ChatRoomRepository,
)
from messaging.infrastructure.persistence import (
    PrismaChatMessageRepository,
    PrismaChatRoomRepository,
)


class PrismaProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_chat_message_repository(self, prisma: Prisma) -> ChatMessageRepository:
        """
        - Return type is ABSTRACT (ChatMessageRepository)
        - Implementation is CONCRETE (PrismaChatMessageRepository)
        """
        return PrismaChatMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_chat_room_repository(self, prisma: Prisma) -> ChatRoomRepository:
        return PrismaChatRoomRepository(prisma)
