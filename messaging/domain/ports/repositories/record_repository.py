"""
Record Repository Port - Read contract shared by every entity store.

find_matching returns projected records (dicts holding only the requested
fields) or None when the store has no result to report. Both methods may
raise; callers decide how to contain that.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Sequence, TypeVar

from messaging.domain.value_objects.pagination import PageWindow, SortOrder

C = TypeVar("C")


class RecordRepository(ABC, Generic[C]):
    @abstractmethod
    async def count_matching(self, criteria: C) -> int: ...

    @abstractmethod
    async def find_matching(
        self,
        criteria: C,
        projection: Sequence[str],
        sort: SortOrder,
        window: PageWindow,
    ) -> Optional[list[dict[str, Any]]]: ...
