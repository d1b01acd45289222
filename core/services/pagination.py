# =============================================================================
# core/services/pagination.py - Page Arithmetic
# =============================================================================
# Offset/slice/page-count helpers shared by the search and results flows.
# Pages are 1-based.
# =============================================================================

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def page_offset(page: int, page_size: int) -> int:
    """Index of the first item on ``page``. page=2, size=20 -> 20."""
    return (page - 1) * page_size


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items. total=45, size=20 -> 3."""
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


def page_slice(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Items on ``page``, or an empty list past the end."""
    start = page_offset(page, page_size)
    return list(items[start:start + page_size])
