from typing import Any, Dict
from math import ceil
from sqlalchemy.orm import Query
from catalog.exceptions import InvalidInputError


def page_offset(page: int, page_size: int) -> int:
    """Offset of a 1-based page."""
    if page < 1:
        raise InvalidInputError("page must be >= 1")
    if page_size < 1:
        raise InvalidInputError("pageSize must be >= 1")
    return (page - 1) * page_size


def total_pages(total: int, page_size: int) -> int:
    return ceil(total / page_size) if page_size > 0 else 0


def paginate(query: Query, page: int, page_size: int) -> Dict[str, Any]:
    """
    Run `query` for one page.

    Returns {"data": rows, "count": total rows, "totalPages": pages}.
    """
    offset = page_offset(page, page_size)
    total = query.order_by(None).count()
    items = query.offset(offset).limit(page_size).all()

    return {
        "data": items,
        "count": total,
        "totalPages": total_pages(total, page_size),
    }
