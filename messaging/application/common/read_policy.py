"""
Read-failure policy - degrade to an empty page when the store fails.

List queries are read-only and idempotent, so a failing store is reported
in the logs and answered with zero pages and no records. Callers cannot
tell "no data" from "store failed"; that is the accepted tradeoff for
keeping listings available through transient store errors.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence, TypeVar

from messaging.application.common.pagination import total_pages
from messaging.domain.ports.repositories import RecordRepository
from messaging.domain.value_objects.pagination import PageWindow, SortOrder

logger = logging.getLogger(__name__)

C = TypeVar("C")


@dataclass
class PageRead:
    pages: int
    records: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "PageRead":
        return cls(pages=0, records=[])


async def read_page_or_empty(
    repository: RecordRepository[C],
    criteria: C,
    projection: Sequence[str],
    sort: SortOrder,
    window: PageWindow,
    context: str,
) -> PageRead:
    """
    Count and fetch one page concurrently, containing any store failure.

    Both reads are awaited; one failing does not cancel the other.

    Args:
        repository: Store to read from
        criteria: Filter shared by the count and the fetch
        projection: Fields to keep on each record
        sort: Sort order of the fetch
        window: Offset/limit of the requested page
        context: Human-readable subject for log lines (e.g. "chat room #c1")

    Returns:
        PageRead with the page count and projected records, or PageRead.empty()
        when either read raised or the fetch returned no result
    """
    results = await asyncio.gather(
        repository.count_matching(criteria),
        repository.find_matching(criteria, projection, sort, window),
        return_exceptions=True,
    )

    # Cancellation and interpreter exits are not store failures, even when
    # the other read failed at the same time
    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result

    for result in results:
        if isinstance(result, Exception):
            logger.error(f"[Read] Store failure while reading {context}: {result!r}")
            return PageRead.empty()

    count, records = results
    if records is None:
        logger.info(f"[Read] Store returned no result for {context}")
        return PageRead.empty()

    return PageRead(pages=total_pages(count, window.limit), records=list(records))
