"""
Pagination helpers.

Location: core/pagination.py

Both the merged category list and the current-month transaction list are
paginated in memory; the transaction list endpoint is paginated by the
store. All three produce the same response structure.
"""
import math
from typing import Any, Dict, List, Sequence


def page_response(content: List[Any], page: int, size: int,
                  total_elements: int) -> Dict[str, Any]:
    """
    Builds the paginated response structure.

    Args:
        content: Items of the requested page
        page: Zero-based page number
        size: Page size (>= 1)
        total_elements: Number of items across every page

    Returns:
        Dict with content, page, size, totalElements, totalPages, first, last
    """
    total_pages = math.ceil(total_elements / size) if size > 0 else 0
    return {
        'content': content,
        'page': page,
        'size': size,
        'totalElements': total_elements,
        'totalPages': total_pages,
        'first': page == 0,
        'last': page >= total_pages - 1,
    }


def paginate(items: Sequence[Any], page: int, size: int) -> Dict[str, Any]:
    """
    Slices an already sorted sequence into one page.

    An out-of-range page yields an empty content list, never an error.

    Raises:
        ValueError: If page < 0 or size < 1
    """
    if page < 0:
        raise ValueError("page must not be negative")
    if size < 1:
        raise ValueError("size must be at least 1")

    total = len(items)
    start = min(page * size, total)
    end = min(start + size, total)
    return page_response(list(items[start:end]), page, size, total)
