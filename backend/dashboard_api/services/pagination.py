"""
Pagination utilities for the service layer.

Invoice search filters client-side, so pages are cut from the filtered,
ordered list rather than pushed to the store as limit/offset.
"""
from __future__ import annotations

import math
from typing import Sequence, TypeVar

from ..config.constants import ITEMS_PER_PAGE

T = TypeVar("T")


def page_offset(page: int, per_page: int = ITEMS_PER_PAGE) -> int:
    """Offset of the first row on a 1-indexed page (pages below 1 clamp to 1)."""
    return (max(1, page) - 1) * per_page


def paginate_rows(rows: Sequence[T], page: int, per_page: int = ITEMS_PER_PAGE) -> list[T]:
    """Return the rows of one page: rows[offset:offset + per_page]."""
    offset = page_offset(page, per_page)
    return list(rows[offset:offset + per_page])


def count_pages(total: int, per_page: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed for `total` rows."""
    return math.ceil(total / per_page) if per_page > 0 else 0
