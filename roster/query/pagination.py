"""
Paginator for the roster table and the AI search result list.

Pages are 1-based. A page past the end yields an empty slice rather than an
error, so stale page indices after a filter change degrade gracefully.
"""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for `total` items: ceil(total / page_size)."""
    if page_size <= 0:
        raise ValueError(f"Page size must be > 0, got {page_size}")
    return math.ceil(total / page_size)


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Return the items on the 1-based `page`."""
    if page_size <= 0:
        raise ValueError(f"Page size must be > 0, got {page_size}")
    if page < 1:
        raise ValueError(f"Page must be >= 1, got {page}")
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


__all__ = ["page_count", "paginate"]
