"""
Base interfaces for the query side of CQRS.

Usage:
    @dataclass(frozen=True)
    class ListChatMessagesQuery(Query[ListChatMessagesResult]):
        chat_id: str
        page: int

    class ListChatMessagesHandler(QueryHandler[ListChatMessagesResult]):
        def __init__(self, message_repository: ChatMessageRepository):
            self._message_repository = message_repository

        async def execute(self, query: ListChatMessagesQuery) -> ListChatMessagesResult:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
