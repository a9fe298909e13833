"""
Generic list-backed repository.

Subclasses bind the entity and criteria types; criteria objects must expose
matches(entity) -> bool.
"""

from dataclasses import asdict
from typing import Any, Generic, Iterable, Optional, Sequence, TypeVar

from messaging.domain.value_objects.pagination import PageWindow, SortOrder

E = TypeVar("E")
C = TypeVar("C")


class InMemoryRecordRepository(Generic[E, C]):
    def __init__(self, records: Optional[Iterable[E]] = None):
        self._records: list[E] = list(records or [])

    def add(self, *records: E) -> None:
        self._records.extend(records)

    def _matching(self, criteria: C) -> list[E]:
        return [r for r in self._records if criteria.matches(r)]

    async def count_matching(self, criteria: C) -> int:
        return len(self._matching(criteria))

    async def find_matching(
        self,
        criteria: C,
        projection: Sequence[str],
        sort: SortOrder,
        window: PageWindow,
    ) -> Optional[list[dict[str, Any]]]:
        records = sorted(
            self._matching(criteria),
            key=lambda r: getattr(r, sort.field),
            reverse=sort.descending,
        )
        page = records[window.offset : window.offset + window.limit]
        return [self._project(r, projection) for r in page]

    @staticmethod
    def _project(record: E, projection: Sequence[str]) -> dict[str, Any]:
        data = asdict(record)
        return {name: data[name] for name in projection}
