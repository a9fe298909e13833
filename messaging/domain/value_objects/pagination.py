"""
Pagination Value Objects - Page window and sort order handed to repositories.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """Offset/limit pair derived from a 1-based page number."""

    offset: int
    limit: int

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError(f"Offset cannot be negative: {self.offset}")
        if self.limit < 1:
            raise ValueError(f"Limit must be at least 1: {self.limit}")


@dataclass(frozen=True)
class SortOrder:
    field: str
    descending: bool = True
