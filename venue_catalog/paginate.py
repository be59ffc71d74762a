from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total_pages: int


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    return math.ceil(count / page_size)


def paginate(results: Sequence[T], page_size: int, current_page: int) -> Page[T]:
    """Slice out one 1-based page; an out-of-range page is just empty."""
    pages = total_pages(len(results), page_size)
    start = max((current_page - 1) * page_size, 0)
    end = max(current_page * page_size, 0)
    return Page(items=list(results[start:end]), total_pages=pages)


def visible_page_numbers(total: int, current_page: int, window_size: int = 7) -> List[int]:
    """
    Page numbers to show in the pager.

    With more pages than fit in the window, the window stays pinned to the
    first pages while the current page is near the start, pinned to the
    last pages while it is near the end, and otherwise slides so the
    current page sits in the middle (fourth of seven by default).
    """
    if total <= window_size:
        return list(range(1, total + 1))
    first = current_page - window_size // 2
    first = max(1, min(first, total - window_size + 1))
    return list(range(first, first + window_size))
