"""
Page/limit pagination for record finders.

Paging inputs are coerced, never rejected: anything that is not a positive
integer falls back to the configured default.
"""
import math
from dataclasses import dataclass, field
from typing import List


@dataclass
class FindResult:
    data: List = field(default_factory=list)
    count: int = 0
    current_page: int = 1
    per_page: int = 10
    total_pages: int = 0

    @classmethod
    def empty(cls, page, per_page):
        return cls(data=[], count=0, current_page=page, per_page=per_page, total_pages=0)


def coerce_positive_int(value, default):
    """
    Coerce a paging input to a positive integer.

    Returns default for None, non-numeric values, and values <= 0.

    Example:
        >>> coerce_positive_int('3', 1)
        3
        >>> coerce_positive_int(-5, 10)
        10
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def paginate(queryset, page, per_page):
    """
    Slice an ordered queryset into one page.

    Args:
        queryset: Ordered queryset (ordering must be deterministic)
        page: Page number, already coerced (>= 1)
        per_page: Page size, already coerced (>= 1)

    Returns:
        FindResult
    """
    count = queryset.count()
    offset = (page - 1) * per_page
    data = list(queryset[offset:offset + per_page]) if offset < count else []
    return FindResult(
        data=data,
        count=count,
        current_page=page,
        per_page=per_page,
        total_pages=math.ceil(count / per_page),
    )
