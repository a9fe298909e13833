"""
Pagination policy shared by every list query.

Pages are 1-based and hold Config.CHAT_PAGE_SIZE records. A page past the
last one is not an error: it reads as an empty slice, and the page count
tells the caller where the data ends.
"""

import math
from typing import Any, Optional

from messaging.config.settings import Config
from messaging.domain.exceptions import InvalidArgumentError
from messaging.domain.value_objects.pagination import PageWindow

INVALID_PAGE_MESSAGE = "page must be a positive integer greater than 0"


def validate_page(page: Any) -> int:
    """Return page unchanged, or raise InvalidArgumentError if it is not an int >= 1."""
    # bool is an int subclass but never a page number
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise InvalidArgumentError(INVALID_PAGE_MESSAGE)
    return page


def page_window(page: int, page_size: Optional[int] = None) -> PageWindow:
    size = Config.CHAT_PAGE_SIZE if page_size is None else page_size
    return PageWindow(offset=(page - 1) * size, limit=size)


def total_pages(count: int, page_size: Optional[int] = None) -> int:
    size = Config.CHAT_PAGE_SIZE if page_size is None else page_size
    return math.ceil(count / size)
