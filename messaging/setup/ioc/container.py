"""
Dishka DI Container Setup.

Flow:
  Container → provides → PrismaChatMessageRepository → to → ListChatMessagesHandler
                                    ↓
                        uses ChatMessageRepository interface
"""

from dishka import AsyncContainer, make_async_container
from messaging.setup.ioc.persistence import PrismaProvider
from messaging.setup.ioc.use_cases import UseCaseProvider


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup, before the FastAPI app starts
    (Dishka adds middleware).
    """
    return make_async_container(PrismaProvider(), UseCaseProvider())
